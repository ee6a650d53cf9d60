"""Pantry and item endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from larder.api.dependencies import get_pantry_repository
from larder.domain.errors import NotFoundError
from larder.infra.Pantry_Repository import PantryRepository
from larder.logic.pantry.analysis import compute_pantry_snapshot
from larder.utilities.validators import ItemInput, ItemUpdateInput, PantryInput

router = APIRouter(prefix="/api")


# -------------------- Pantries --------------------
@router.get("/pantries")
def list_pantries(repo: PantryRepository = Depends(get_pantry_repository)):
    return {"pantries": [p.to_dict(include_items=False) for p in repo.list_pantries()]}


@router.post("/pantries", status_code=201)
def create_pantry(payload: PantryInput, repo: PantryRepository = Depends(get_pantry_repository)):
    pantry = repo.create_pantry(payload.name)
    return {"pantry": pantry.to_dict(include_items=False)}


@router.get("/pantries/{pantry_id}")
def get_pantry(pantry_id: int, repo: PantryRepository = Depends(get_pantry_repository)):
    try:
        pantry = repo.get_pantry(pantry_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="not found")
    return {"pantry": pantry.to_dict()}


@router.put("/pantries/{pantry_id}")
def rename_pantry(pantry_id: int, payload: PantryInput, repo: PantryRepository = Depends(get_pantry_repository)):
    try:
        pantry = repo.rename_pantry(pantry_id, payload.name)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="not found")
    return {"pantry": pantry.to_dict(include_items=False)}


@router.delete("/pantries/{pantry_id}")
def delete_pantry(pantry_id: int, repo: PantryRepository = Depends(get_pantry_repository)):
    try:
        repo.delete_pantry(pantry_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="not found")
    return {"ok": True}


@router.get("/pantries/{pantry_id}/alerts")
def pantry_alerts(pantry_id: int, threshold: Optional[int] = Query(default=None, ge=0),
                  repo: PantryRepository = Depends(get_pantry_repository)):
    """Low stock and depleted items of one pantry."""
    try:
        items = repo.load_pantry_items(pantry_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="not found")
    low_stock, depleted = compute_pantry_snapshot(items, threshold=threshold)
    return {"pantry_id": pantry_id, "low_stock": low_stock, "depleted": depleted}


# -------------------- Items --------------------
@router.get("/items")
def list_items(pantry_id: Optional[int] = Query(default=None),
               repo: PantryRepository = Depends(get_pantry_repository)):
    return {"items": [i.to_dict() for i in repo.list_items(pantry_id)]}


@router.post("/items", status_code=201)
def add_item(payload: ItemInput, repo: PantryRepository = Depends(get_pantry_repository)):
    barcode = payload.barcode
    try:
        item = repo.add_item(
            payload.pantry_id,
            payload.name,
            payload.quantity,
            barcode_code=barcode.code if barcode else None,
            barcode_label=barcode.label if barcode else None,
        )
    except NotFoundError:
        raise HTTPException(status_code=404, detail="pantry not found")
    return {"item": item.to_dict()}


@router.get("/items/{item_id}")
def get_item(item_id: int, repo: PantryRepository = Depends(get_pantry_repository)):
    try:
        return {"item": repo.get_item(item_id).to_dict()}
    except NotFoundError:
        raise HTTPException(status_code=404, detail="not found")


@router.put("/items/{item_id}")
def update_item(item_id: int, payload: ItemUpdateInput, repo: PantryRepository = Depends(get_pantry_repository)):
    try:
        item = repo.update_item(item_id, name=payload.name, quantity=payload.quantity)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="not found")
    return {"item": item.to_dict()}


@router.delete("/items/{item_id}")
def delete_item(item_id: int, repo: PantryRepository = Depends(get_pantry_repository)):
    try:
        repo.delete_item(item_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="not found")
    return {"ok": True}
