import logging

from fastapi import APIRouter, Depends, HTTPException

from larder.api.dependencies import get_kitchen
from larder.domain.errors import NotFoundError
from larder.logic.kitchen.service import KitchenService
from larder.utilities.validators import CookInput

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)


@router.post("/cook")
def cook(payload: CookInput, kitchen: KitchenService = Depends(get_kitchen)):
    """Match a recipe against a pantry and optionally deduct what it uses.

    ``deduct=false`` (default) only simulates: ``applied`` is empty and nothing
    is stored. With ``deduct=true`` every matched deduction is committed in one
    batch and ``applied`` reports the stored before/after per item.
    """
    try:
        outcome = kitchen.cook(payload.pantry_id, payload.recipe_id,
                               deduct=payload.deduct, fallback_per_ingredient=payload.per_ingredient)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except OSError as e:
        logger.error("Cook failed to persist for pantry=%s recipe=%s: %s", payload.pantry_id, payload.recipe_id, e)
        raise HTTPException(status_code=500, detail="Failed to apply deductions")
    return outcome.to_dict()
