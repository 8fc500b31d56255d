"""Global registry of named events."""

from __future__ import annotations

from typing import Any, Callable, Dict

from .events import Event
from .singleton import Singleton

INPUT = "input"
UPDATE = "update"
RENDER_3D = "render_3d"
RENDER_2D = "render_2d"
IMGUI = "imgui"
ON_WINDOW_RESIZE = "on_window_resize"


class EventManager(Singleton):
    """Routes subscriptions and invocations to events looked up by name."""

    def __init__(self) -> None:
        self._events: Dict[str, Event] = {}

    def _teardown(self) -> None:
        self._events.clear()

    @classmethod
    def subscribe(cls, name: str, owner: Any, function: Callable[..., Any]) -> None:
        """Subscribe ``function`` under ``owner`` to the event ``name``."""
        events = cls._require()._events
        event = events.get(name)
        if event is None:
            event = events[name] = Event()
        event.subscribe(owner, function)

    @classmethod
    def unsubscribe(cls, name: str, owner: Any) -> None:
        """Remove the subscription of ``owner`` from the event ``name``."""
        event = cls._require()._events.get(name)
        if event is not None:
            event.unsubscribe(owner)

    @classmethod
    def invoke(cls, name: str, *args: Any) -> None:
        """Invoke the event ``name`` if anything was ever subscribed to it."""
        event = cls._require()._events.get(name)
        if event is not None:
            event.invoke(*args)