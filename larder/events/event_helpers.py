"""Event helper utilities.

Quick import:
    from larder.events.event_helpers import (
        publish_low_stock, publish_depleted, publish_recipe_cooked, publish_stock_changes,
    )
"""
from __future__ import annotations
from typing import Iterable, Optional

from larder.domain.Consumption import AppliedDeduction
from larder.domain.PantryItem import PantryItem
from larder.utilities.config import LOW_STOCK_THRESHOLD
from .Event_Bus import publish, PANTRY_LOW_STOCK, PANTRY_DEPLETED, RECIPE_COOKED

__all__ = [
    'publish_low_stock', 'publish_depleted', 'publish_recipe_cooked', 'publish_stock_changes',
    'PANTRY_LOW_STOCK', 'PANTRY_DEPLETED', 'RECIPE_COOKED'
]


def publish_low_stock(item: PantryItem, remaining: int, threshold: int = LOW_STOCK_THRESHOLD):
    """Publish a pantry.low_stock event."""
    publish(PANTRY_LOW_STOCK, {
        'item_id': item.id,
        'name': item.name,
        'pantry_id': item.pantry_id,
        'remaining': remaining,
        'threshold': threshold,
    })


def publish_depleted(item: PantryItem):
    """Publish a pantry.depleted event."""
    publish(PANTRY_DEPLETED, {
        'item_id': item.id,
        'name': item.name,
        'pantry_id': item.pantry_id,
        'remaining': 0,
    })


def publish_recipe_cooked(pantry_id: int, recipe_id: int, title: str, coverage: float,
                          applied: Iterable[AppliedDeduction]):
    publish(RECIPE_COOKED, {
        'pantry_id': pantry_id,
        'recipe_id': recipe_id,
        'title': title,
        'coverage': coverage,
        'applied': [a.to_dict() for a in applied],
    })


def publish_stock_changes(items: Iterable[PantryItem], applied: Iterable[AppliedDeduction],
                          threshold: Optional[int] = None):
    """Raise depleted / low stock alerts for the items a committed batch touched.

    Only the last state of each item counts when it appears more than once.
    """
    threshold = LOW_STOCK_THRESHOLD if threshold is None else threshold
    by_id = {item.id: item for item in items}
    final = {}
    for a in applied:
        final[a.item_id] = a.quantity_after
    for item_id, remaining in final.items():
        item = by_id.get(item_id)
        if item is None:
            continue
        if remaining == 0:
            publish_depleted(item)
        elif remaining <= threshold:
            publish_low_stock(item, remaining, threshold)
