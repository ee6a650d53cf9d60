"""Consumption plan entities.

PlannedDeduction   one matched ingredient and the item it would draw from
ConsumptionPlan    the planner's proposal (nothing applied yet)
AppliedDeduction   authoritative before/after returned by the store after a batch commit
CookOutcome        what a cook request reports back
"""
from typing import List, Optional


class PlannedDeduction:
    def __init__(self, ingredient: str, item_id: int, quantity_before: int, decrement: int):
        self.ingredient = ingredient
        self.item_id = item_id
        self.quantity_before = quantity_before
        self.decrement = decrement

    def __repr__(self) -> str:
        return f"PlannedDeduction({self.ingredient!r} -> item {self.item_id}: {self.quantity_before} - {self.decrement})"

    def to_dict(self):
        return {
            "ingredient": self.ingredient,
            "item_id": self.item_id,
            "quantity_before": self.quantity_before,
            "decrement": self.decrement,
        }


class ConsumptionPlan:
    def __init__(self, deductions: Optional[List[PlannedDeduction]] = None,
                 missing: Optional[List[str]] = None, total: int = 1):
        self.deductions = deductions[:] if deductions else []
        self.missing = missing[:] if missing else []
        self.total = total

    @property
    def matched(self) -> List[str]:
        return [d.ingredient for d in self.deductions]

    @property
    def coverage(self) -> float:
        return (self.total - len(self.missing)) / self.total

    @property
    def summary(self):
        return {"matched": len(self.deductions), "missing": len(self.missing), "total": self.total}

    def batch(self):
        '''Decrement batch in the shape the store's apply_decrements expects.'''
        return [{"item_id": d.item_id, "decrement": d.decrement} for d in self.deductions]

    def to_dict(self):
        return {
            "coverage": self.coverage,
            "matched": [d.to_dict() for d in self.deductions],
            "missing": self.missing,
            "summary": self.summary,
        }


class AppliedDeduction:
    def __init__(self, item_id: int, quantity_before: int, quantity_after: int, decrement_applied: int):
        self.item_id = item_id
        self.quantity_before = quantity_before
        self.quantity_after = quantity_after
        self.decrement_applied = decrement_applied

    def __repr__(self) -> str:
        return f"AppliedDeduction(item {self.item_id}: {self.quantity_before} -> {self.quantity_after})"

    @staticmethod
    def from_dict(data):
        return AppliedDeduction(
            item_id=data["item_id"],
            quantity_before=data["quantity_before"],
            quantity_after=data["quantity_after"],
            decrement_applied=data["decrement_applied"],
        )

    def to_dict(self):
        return {
            "item_id": self.item_id,
            "quantity_before": self.quantity_before,
            "quantity_after": self.quantity_after,
            "decrement_applied": self.decrement_applied,
        }


class CookOutcome:
    def __init__(self, pantry_id: int, recipe_id: int, title: str, plan: ConsumptionPlan,
                 applied: Optional[List[AppliedDeduction]] = None):
        self.pantry_id = pantry_id
        self.recipe_id = recipe_id
        self.title = title
        self.plan = plan
        self.applied = applied[:] if applied else []

    def to_dict(self):
        data = {"pantry_id": self.pantry_id, "recipe_id": self.recipe_id, "title": self.title}
        data.update(self.plan.to_dict())
        data["applied"] = [a.to_dict() for a in self.applied]
        return data
