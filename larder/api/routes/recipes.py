from fastapi import APIRouter, Depends, HTTPException

from larder.api.dependencies import get_recipe_repository
from larder.domain.errors import NotFoundError
from larder.infra.Recipe_Repository import RecipeRepository
from larder.utilities.validators import RecipeInput, RecipeUpdateInput

router = APIRouter(prefix="/api/recipes")


@router.get("")
def list_recipes(repo: RecipeRepository = Depends(get_recipe_repository)):
    """Return all recipes (id order)."""
    recipes = repo.list_recipes()
    return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}


@router.post("", status_code=201)
def add_recipe(payload: RecipeInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    recipe = repo.add_recipe(payload.model_dump())
    return {"recipe": recipe.to_dict()}


@router.get("/{recipe_id}")
def get_recipe(recipe_id: int, repo: RecipeRepository = Depends(get_recipe_repository)):
    try:
        return {"recipe": repo.load_recipe(recipe_id).to_dict()}
    except NotFoundError:
        raise HTTPException(status_code=404, detail="not found")


@router.put("/{recipe_id}")
def update_recipe(recipe_id: int, payload: RecipeUpdateInput, repo: RecipeRepository = Depends(get_recipe_repository)):
    try:
        recipe = repo.replace_recipe(recipe_id, payload.model_dump(exclude_unset=True))
    except NotFoundError:
        raise HTTPException(status_code=404, detail="not found")
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"recipe": recipe.to_dict()}


@router.delete("/{recipe_id}")
def delete_recipe(recipe_id: int, repo: RecipeRepository = Depends(get_recipe_repository)):
    try:
        repo.delete_recipe(recipe_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="not found")
    return {"ok": True}
