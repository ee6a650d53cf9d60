from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from larder.api.dependencies import get_kitchen
from larder.domain.errors import NotFoundError
from larder.logic.kitchen.service import KitchenService
from larder.utilities.config import DEFAULT_RANK_LIMIT

router = APIRouter(prefix="/api")


@router.get("/match")
def match(pantry_id: Optional[int] = Query(default=None),
          recipe_id: Optional[int] = Query(default=None),
          limit: int = Query(default=DEFAULT_RANK_LIMIT),
          min_coverage: float = Query(default=0.0),
          kitchen: KitchenService = Depends(get_kitchen)):
    """Coverage of one recipe, or every recipe ranked by coverage.

    GET /api/match?pantry_id=1&recipe_id=123          -> {pantry_id, result}
    GET /api/match?pantry_id=1&limit=20&min_coverage=0.2 -> {pantry_id, count, results}

    ``limit=0`` returns the full ranked list. An unknown pantry or recipe is a
    404; an existing pantry with no items scores every ingredient as missing.
    """
    try:
        if recipe_id:
            result = kitchen.check_coverage(pantry_id, recipe_id)
            return {"pantry_id": pantry_id, "result": result.to_dict()}
        results = kitchen.rank_recipes_by_coverage(pantry_id, min_coverage=min_coverage, limit=limit)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"pantry_id": pantry_id, "count": len(results), "results": [r.to_dict() for r in results]}
