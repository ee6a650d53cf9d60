"""Coverage, cook and ranking operations.

Ties the pure matching engine to the repositories: load the pantry items and
the recipe, build a fresh match bank, score or plan, and (for a real cook)
hand the plan to the store as one atomic batch.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from larder.domain.Consumption import CookOutcome
from larder.domain.Coverage import CoverageResult
from larder.domain.Recipe import Recipe
from larder.domain.errors import require_id
from larder.events.event_helpers import publish_recipe_cooked, publish_stock_changes
from larder.infra.Pantry_Repository import PantryRepository
from larder.infra.Recipe_Repository import RecipeRepository
from larder.logic.matching.bank import build_bank, build_name_pool
from larder.logic.matching.consumption import plan_consumption
from larder.logic.matching.coverage import rank_results, score_recipe
from larder.utilities.config import DEFAULT_PER_INGREDIENT, DEFAULT_RANK_LIMIT

logger = logging.getLogger(__name__)

__all__ = ["KitchenService"]


class KitchenService:
    def __init__(self, pantries: PantryRepository, recipes: RecipeRepository):
        self.pantries = pantries
        self.recipes = recipes

    def check_coverage(self, pantry_id: int, recipe_id: int) -> CoverageResult:
        """Score one recipe against one pantry. Read-only.

        An unknown pantry raises PantryNotFound rather than scoring against an
        empty item list.
        """
        pantry_id = require_id(pantry_id, "pantry_id")
        recipe_id = require_id(recipe_id, "recipe_id")
        recipe = self.recipes.load_recipe(recipe_id)
        items = self.pantries.load_pantry_items(pantry_id)
        return score_recipe(recipe, build_bank(items))

    def cook(self, pantry_id: int, recipe_id: int, deduct: bool = False,
             fallback_per_ingredient: float = DEFAULT_PER_INGREDIENT) -> CookOutcome:
        """Plan the pantry deductions for a recipe and, if ``deduct``, commit them.

        With ``deduct`` false nothing is written and ``applied`` stays empty, so
        repeated simulations over unchanged stock return identical plans. When
        committing, the before/after values in ``applied`` come from the store
        and supersede the plan's working estimates.
        """
        pantry_id = require_id(pantry_id, "pantry_id")
        recipe_id = require_id(recipe_id, "recipe_id")
        recipe = self.recipes.load_recipe(recipe_id)
        items = self.pantries.load_pantry_items(pantry_id)

        plan = plan_consumption(recipe.ingredients, build_bank(items), fallback_per_ingredient)
        logger.info("Cook pantry=%s recipe=%s deduct=%s coverage=%.3f missing=%s",
                    pantry_id, recipe_id, deduct, plan.coverage, plan.missing)

        applied = []
        if deduct and plan.deductions:
            applied = self.pantries.apply_decrements(plan.batch())
            publish_recipe_cooked(pantry_id, recipe_id, recipe.title, plan.coverage, applied)
            publish_stock_changes(items, applied)
        return CookOutcome(pantry_id, recipe_id, recipe.title, plan, applied)

    def rank_recipes_by_coverage(self, pantry_id: int, candidate_recipes: Optional[Iterable[Recipe]] = None,
                                 min_coverage: float = 0.0,
                                 limit: Optional[int] = DEFAULT_RANK_LIMIT) -> List[CoverageResult]:
        """Score every candidate (all stored recipes when None) and rank them.

        Best coverage first, fewer ingredients breaking ties; falsy ``limit``
        returns the full filtered list.
        """
        pantry_id = require_id(pantry_id, "pantry_id")
        if candidate_recipes is None:
            candidate_recipes = self.recipes.list_recipes()
        pool = build_name_pool(self.pantries.load_pantry_items(pantry_id))
        results = [score_recipe(recipe, pool) for recipe in candidate_recipes]
        return rank_results(results, min_coverage=min_coverage, limit=limit)
