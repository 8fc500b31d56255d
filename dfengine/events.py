"""A named-owner multicast event."""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple


class Event:
    """Calls every subscribed function when invoked.

    Each owner holds at most one subscription; subscribing again with the
    same owner replaces the earlier function. Owners are matched by identity.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[int, Tuple[Any, Callable[..., Any]]] = {}

    def __len__(self) -> int:
        return len(self._subscribers)

    def __contains__(self, owner: Any) -> bool:
        return id(owner) in self._subscribers

    def subscribe(self, owner: Any, function: Callable[..., Any]) -> None:
        """Register ``function`` under ``owner``, replacing any earlier one."""
        if not callable(function):
            raise TypeError("subscribed function must be callable")
        self._subscribers[id(owner)] = (owner, function)

    def unsubscribe(self, owner: Any) -> None:
        """Remove the subscription of ``owner``; unknown owners are ignored."""
        self._subscribers.pop(id(owner), None)

    def invoke(self, *args: Any) -> None:
        """Call every subscribed function with ``args``."""
        for _owner, function in list(self._subscribers.values()):
            function(*args)