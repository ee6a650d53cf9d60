"""Web-facing observers for pantry events.

Subscribes to the GLOBAL_EVENT_BUS for pantry.low_stock, pantry.depleted and
recipe.cooked and keeps a bounded in-memory buffer of recent events that the
API exposes for polling (``GET /api/events?since=<cursor>``).

Each event carries an auto-increment id used as a cursor so clients only fetch
newer events. The buffer is per process.
"""
from __future__ import annotations
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import GLOBAL_EVENT_BUS, PANTRY_LOW_STOCK, PANTRY_DEPLETED, RECIPE_COOKED

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False

_COPIED_FIELDS = ('item_id', 'name', 'pantry_id', 'recipe_id', 'title', 'remaining', 'threshold', 'coverage')


def _record(event_name: str, payload: Any):
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        }
        if isinstance(payload, dict):
            for k in _COPIED_FIELDS:
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in (PANTRY_LOW_STOCK, PANTRY_DEPLETED, RECIPE_COOKED):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns every buffered event. ``next_cursor`` is the
    largest id seen so the client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


def clear():
    """Drop buffered events (cursor keeps counting)."""
    with _lock:
        _events.clear()


__all__ = ['start', 'get_events', 'clear', 'MAX_EVENTS']
