"""Recipe domain entity: title, metadata and an ordered list of RecipeIngredient rows."""
from numbers import Real
from typing import List, Optional


def _clean_qty(value) -> Optional[float]:
    """Keep only real numbers; everything else (strings, bools, None) becomes None."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    return float(value)


class RecipeIngredient:
    def __init__(self, name: str = "", qty: Optional[float] = None, unit: Optional[str] = None):
        self.name = name
        self.qty = qty
        self.unit = unit

    def __str__(self) -> str:
        if self.qty is None:
            return self.name
        unit = f" {self.unit}" if self.unit else ""
        return f"{self.qty:g}{unit} {self.name}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a RecipeIngredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        unit = d.get("unit")
        if not isinstance(unit, str) or not unit.strip():
            unit = None
        return RecipeIngredient(
            name=str(d.get("name") or "").strip(),
            qty=_clean_qty(d.get("qty")),
            unit=unit.strip() if unit else None,
        )

    def to_dict(self):
        return {"name": self.name, "qty": self.qty, "unit": self.unit}


class Recipe:
    def __init__(self, id: Optional[int] = None, title: str = "", ingredients: Optional[List[RecipeIngredient]] = None,
                 servings: Optional[int] = None, steps: Optional[str] = None, notes: Optional[str] = None,
                 source_type: Optional[str] = None, source_url: Optional[str] = None,
                 tags: Optional[List[str]] = None):
        self.id = id
        self.title = title
        self.ingredients = ingredients[:] if ingredients else []
        self.servings = servings
        self.steps = steps
        self.notes = notes
        self.source_type = source_type
        self.source_url = source_url
        self.tags = tags[:] if tags else []

    @property
    def ingredient_names(self) -> List[str]:
        return [ing.name for ing in self.ingredients]

    def __str__(self) -> str:
        return f"{self.title} - {len(self.ingredients)} ingredients - Tags: {', '.join(self.tags)}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        ingredients = [RecipeIngredient.from_dict(i) for i in d.get("ingredients") or []]
        return Recipe(
            id=d.get("id"),
            title=str(d.get("title") or ""),
            ingredients=ingredients,
            servings=d.get("servings"),
            steps=d.get("steps"),
            notes=d.get("notes"),
            source_type=d.get("source_type"),
            source_url=d.get("source_url"),
            tags=[str(t).strip() for t in d.get("tags") or [] if str(t).strip()],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "servings": self.servings,
            "steps": self.steps,
            "notes": self.notes,
            "source_type": self.source_type,
            "source_url": self.source_url,
            "tags": self.tags,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }
