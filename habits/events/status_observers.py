"""Status-line observer for grid events.

Subscribes to an EventBus and keeps a bounded buffer of human-readable status
entries; the terminal UI shows the latest one under the grid.
"""
from __future__ import annotations
from datetime import datetime
from typing import Any, Dict, List, Optional

from .Event_Bus import (
    EventBus, GRID_TOGGLED, HABIT_ADDED, HABIT_REMOVED, WEEK_SAVED, WEEK_SAVE_FAILED
)

MAX_EVENTS = 50


def describe(event_name: str, payload: Any) -> str:
    """One-line text for an event."""
    payload = payload or {}
    if event_name == GRID_TOGGLED:
        mark = "done" if payload.get("done") else "not done"
        return f"{payload.get('habit')} on {payload.get('day')}: {mark}"
    if event_name == HABIT_ADDED:
        return f"Added habit '{payload.get('habit')}'"
    if event_name == HABIT_REMOVED:
        return f"Removed habit '{payload.get('habit')}'"
    if event_name == WEEK_SAVED:
        return f"Saved week {payload.get('week')}"
    if event_name == WEEK_SAVE_FAILED:
        return f"Save failed: {payload.get('error')} (changes kept in memory)"
    return event_name


class StatusLog:
    def __init__(self, max_events: int = MAX_EVENTS):
        self.max_events = max_events
        self._events: List[Dict[str, Any]] = []

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        self._events.append({
            'type': event_name,
            'ts': datetime.now().strftime("%H:%M:%S"),
            'text': describe(event_name, payload),
            'error': event_name == WEEK_SAVE_FAILED,
        })
        if len(self._events) > self.max_events:
            del self._events[: len(self._events) - self.max_events]

    def attach(self, bus: EventBus) -> "StatusLog":
        for name in (GRID_TOGGLED, HABIT_ADDED, HABIT_REMOVED, WEEK_SAVED, WEEK_SAVE_FAILED):
            bus.subscribe(name, self.record)
        return self

    def latest(self) -> Optional[Dict[str, Any]]:
        return self._events[-1] if self._events else None


__all__ = ['StatusLog', 'describe', 'MAX_EVENTS']
