"""Event Bus / Observer implementation for pantry and cooking notifications.

Event names:
  pantry.low_stock -> payload {"item_id", "name", "pantry_id", "remaining", "threshold"}
  pantry.depleted  -> payload {"item_id", "name", "pantry_id", "remaining": 0}
  recipe.cooked    -> payload {"pantry_id", "recipe_id", "title", "coverage", "applied"}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

from larder.utilities.constants import PANTRY_LOW_STOCK, PANTRY_DEPLETED, RECIPE_COOKED

logger = logging.getLogger(__name__)

Subscriber = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Subscriber]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Subscriber):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Subscriber):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def subscribers(self, event_name: str) -> List[Subscriber]:
		return list(self._subscribers.get(event_name, []))

	def publish(self, event_name: str, payload: Any):
		# A failing subscriber must not abort a cook that already committed
		for cb in self.subscribers(event_name):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish',
	'PANTRY_LOW_STOCK', 'PANTRY_DEPLETED', 'RECIPE_COOKED'
]
