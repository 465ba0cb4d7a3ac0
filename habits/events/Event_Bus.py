"""Publish/subscribe hub for grid changes.

Event names:
  grid.toggled      -> payload {"week": WeekKey, "habit": str, "day": str, "done": bool}
  habit.added       -> payload {"week": WeekKey, "habit": str, "color": str}
  habit.removed     -> payload {"week": WeekKey, "habit": str}
  week.saved        -> payload {"week": WeekKey, "path": Path}
  week.save_failed  -> payload {"week": WeekKey, "error": WeekStoreError}

Subscribers are callables taking (event_name, payload). The bus is created by the
application and handed to whoever publishes or listens; there is no module-level instance.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

GRID_TOGGLED = "grid.toggled"
HABIT_ADDED = "habit.added"
HABIT_REMOVED = "habit.removed"
WEEK_SAVED = "week.saved"
WEEK_SAVE_FAILED = "week.save_failed"

Listener = Callable[[str, Any], None]


class EventBus:
	def __init__(self):
		self._listeners: Dict[str, List[Listener]] = defaultdict(list)

	def subscribe(self, event_name: str, listener: Listener):
		"""Register once per event name; repeated subscriptions are ignored."""
		listeners = self._listeners[event_name]
		if listener not in listeners:
			listeners.append(listener)

	def listeners(self, event_name: str) -> List[Listener]:
		return list(self._listeners.get(event_name, ()))

	def publish(self, event_name: str, payload: Any = None) -> int:
		"""Deliver to every listener in subscription order; returns how many succeeded."""
		delivered = 0
		for listener in self.listeners(event_name):
			try:
				listener(event_name, payload)
			except Exception:
				# Listener failures are logged, never re-raised to the publisher
				logger.exception("Error delivering %s to %r", event_name, listener)
				continue
			delivered += 1
		return delivered


__all__ = [
	'EventBus', 'Listener', 'GRID_TOGGLED', 'HABIT_ADDED', 'HABIT_REMOVED', 'WEEK_SAVED', 'WEEK_SAVE_FAILED'
]
