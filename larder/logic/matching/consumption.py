"""Consumption planning: which pantry item each recipe ingredient would draw from, and how much.

The planner never touches storage. It keeps its own working quantities keyed by
item id so that several ingredients drawing on the same item share its stock
within one plan, while the PantryItem objects themselves stay untouched.
"""
from __future__ import annotations
import logging
import math
from numbers import Real
from typing import Dict, List, Optional, Sequence

from larder.domain.Consumption import ConsumptionPlan, PlannedDeduction
from larder.domain.PantryItem import PantryItem
from larder.domain.Recipe import RecipeIngredient
from larder.logic.matching.bank import MatchBank, find_candidates
from larder.logic.matching.coverage import forced_total
from larder.logic.matching.normalizer import normalize

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_PER_INGREDIENT", "decrement_for", "pick_candidate", "plan_consumption"]

DEFAULT_PER_INGREDIENT = 1


def _finite_number(value) -> bool:
    return not isinstance(value, bool) and isinstance(value, Real) and math.isfinite(value)


def decrement_for(ingredient: RecipeIngredient, fallback_per_ingredient: float = DEFAULT_PER_INGREDIENT) -> int:
    """Whole units to take for one ingredient.

    The ingredient's own quantity rounded up when it is a finite number,
    otherwise the fallback rounded up; never negative. Units are ignored.
    """
    if _finite_number(ingredient.qty):
        amount = ingredient.qty
    elif _finite_number(fallback_per_ingredient):
        amount = fallback_per_ingredient
    else:
        amount = DEFAULT_PER_INGREDIENT
    return max(0, math.ceil(amount))


def pick_candidate(candidates: Sequence[PantryItem], working: Dict[int, int]) -> Optional[PantryItem]:
    """First candidate with stock left, else the first candidate, else None."""
    for item in candidates:
        if working.get(item.id, item.quantity) > 0:
            return item
    return candidates[0] if candidates else None


def plan_consumption(ingredients: Sequence[RecipeIngredient], bank: MatchBank,
                     fallback_per_ingredient: float = DEFAULT_PER_INGREDIENT) -> ConsumptionPlan:
    """Greedy single pass over ``ingredients`` in the given order.

    Earlier ingredients get first claim on shared items. A matched item that is
    already depleted is still recorded (its working quantity stays at 0).
    """
    working: Dict[int, int] = {}
    deductions: List[PlannedDeduction] = []
    missing: List[str] = []

    for ingredient in ingredients:
        candidates = find_candidates(bank, normalize(ingredient.name))
        picked = pick_candidate(candidates, working)
        if picked is None:
            missing.append(ingredient.name)
            continue

        before = working.get(picked.id, picked.quantity)
        decrement = decrement_for(ingredient, fallback_per_ingredient)
        deductions.append(PlannedDeduction(ingredient.name, picked.id, before, decrement))
        working[picked.id] = max(0, before - decrement)

    plan = ConsumptionPlan(deductions, missing, total=forced_total(len(ingredients)))
    logger.debug("Planned %d deductions, %d missing", len(deductions), len(missing))
    return plan
