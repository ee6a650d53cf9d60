"""FastAPI dependency providers.

Tests swap the store by overriding ``get_store`` in ``app.dependency_overrides``.
"""
from fastapi import Depends

from larder.infra.json_store import JsonStore, get_store as _configured_store
from larder.infra.Pantry_Repository import PantryRepository
from larder.infra.Recipe_Repository import RecipeRepository
from larder.logic.kitchen.service import KitchenService


def get_store() -> JsonStore:
    return _configured_store()


def get_pantry_repository(store: JsonStore = Depends(get_store)) -> PantryRepository:
    return PantryRepository(store)


def get_recipe_repository(store: JsonStore = Depends(get_store)) -> RecipeRepository:
    return RecipeRepository(store)


def get_kitchen(pantries: PantryRepository = Depends(get_pantry_repository),
                recipes: RecipeRepository = Depends(get_recipe_repository)) -> KitchenService:
    return KitchenService(pantries, recipes)
