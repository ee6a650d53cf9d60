import logging
from typing import Any, Dict, List

from larder.domain.Recipe import Recipe
from larder.domain.errors import RecipeNotFound
from larder.infra.json_store import JsonStore, next_id

logger = logging.getLogger(__name__)

_SCALARS = ("title", "servings", "steps", "notes", "source_type", "source_url")


class RecipeRepository:
    def __init__(self, store: JsonStore):
        self.store = store

    def list_recipes(self) -> List[Recipe]:
        """All recipes in id order."""
        doc = self.store.read()
        rows = sorted(doc["recipes"], key=lambda r: r["id"])
        return [Recipe.from_dict(r) for r in rows]

    def load_recipe(self, recipe_id: int) -> Recipe:
        doc = self.store.read()
        row = next((r for r in doc["recipes"] if r.get("id") == recipe_id), None)
        if row is None:
            raise RecipeNotFound(recipe_id)
        return Recipe.from_dict(row)

    def add_recipe(self, data: Dict[str, Any]) -> Recipe:
        recipe = Recipe.from_dict(data)
        recipe.title = recipe.title.strip()
        if not recipe.title:
            raise ValueError("title required")
        with self.store.transaction() as doc:
            recipe.id = next_id(doc["recipes"])
            doc["recipes"].append(recipe.to_dict())
        logger.info("Added recipe %s '%s' with %d ingredients", recipe.id, recipe.title, len(recipe.ingredients))
        return recipe

    def replace_recipe(self, recipe_id: int, data: Dict[str, Any]) -> Recipe:
        """Update the scalar fields present in ``data``; lists given for tags or
        ingredients replace the stored ones wholesale."""
        with self.store.transaction() as doc:
            index = next((i for i, r in enumerate(doc["recipes"]) if r.get("id") == recipe_id), None)
            if index is None:
                raise RecipeNotFound(recipe_id)
            merged = dict(doc["recipes"][index])
            for key in _SCALARS:
                if key in data:
                    merged[key] = data[key]
            if isinstance(data.get("tags"), list):
                merged["tags"] = data["tags"]
            if isinstance(data.get("ingredients"), list):
                merged["ingredients"] = data["ingredients"]
            recipe = Recipe.from_dict(merged)
            recipe.id = recipe_id
            recipe.title = recipe.title.strip()
            if not recipe.title:
                raise ValueError("title required")
            doc["recipes"][index] = recipe.to_dict()
        return recipe

    def delete_recipe(self, recipe_id: int) -> None:
        with self.store.transaction() as doc:
            if not any(r.get("id") == recipe_id for r in doc["recipes"]):
                raise RecipeNotFound(recipe_id)
            doc["recipes"] = [r for r in doc["recipes"] if r.get("id") != recipe_id]
