"""Pantry analysis helpers."""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Tuple

from larder.domain.PantryItem import PantryItem
from larder.utilities.config import LOW_STOCK_THRESHOLD

__all__ = ["compute_low_stock", "compute_depleted", "compute_pantry_snapshot"]


def compute_low_stock(items: Iterable[PantryItem], *, threshold: int | None = None) -> List[Dict[str, Any]]:
    """Items still in stock but at or below ``threshold`` (config default), lowest first."""
    th = LOW_STOCK_THRESHOLD if threshold is None else threshold
    low: List[Dict[str, Any]] = []
    for item in items:
        if 0 < item.quantity <= th:
            low.append({
                'item_id': item.id,
                'name': item.name,
                'quantity': item.quantity,
                'threshold': th,
            })
    low.sort(key=lambda x: (x['quantity'], x['name'].lower()))
    return low


def compute_depleted(items: Iterable[PantryItem]) -> List[Dict[str, Any]]:
    """Items whose quantity has reached zero."""
    out = [{'item_id': i.id, 'name': i.name} for i in items if i.quantity == 0]
    out.sort(key=lambda x: x['name'].lower())
    return out


def compute_pantry_snapshot(items: Iterable[PantryItem], *, threshold: int | None = None) -> Tuple[list, list]:
    items = list(items)
    return compute_low_stock(items, threshold=threshold), compute_depleted(items)
