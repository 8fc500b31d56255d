"""Global registry of named render callbacks."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Optional, Union

from .render_callback import RenderCallback
from .singleton import Singleton

_log = logging.getLogger(__name__)


class RenderCallbackManager(Singleton):
    """Creates, looks up, renders and destroys render callbacks by name."""

    def __init__(self) -> None:
        self._callbacks: Dict[str, RenderCallback] = {}

    def _teardown(self) -> None:
        self._close_all()

    def _close_all(self) -> None:
        callbacks = self._callbacks
        self._callbacks = {}
        for name, callback in callbacks.items():
            _log.info("Destroyed callback: %s", name)
            callback.close()

    def __len__(self) -> int:
        return len(self._callbacks)

    def __contains__(self, name: object) -> bool:
        return name in self._callbacks

    @classmethod
    def create(
        cls,
        name: str,
        sources: Union[Any, Iterable[Any]],
        factory: Callable[[Any], Any],
        callback: Callable[..., Any],
    ) -> Optional[RenderCallback]:
        """Create and register a callback; return None if ``name`` is taken."""
        callbacks = cls._require()._callbacks
        if name in callbacks:
            _log.warning("Callback already exist: %s", name)
            return None
        render_callback = RenderCallback(name, sources, factory, callback)
        callbacks[name] = render_callback
        _log.info("Created callback: %s", name)
        return render_callback

    @classmethod
    def destroy(cls, target: Union[str, RenderCallback, None]) -> bool:
        """Close and forget a callback given by name or by object.

        Returns False when nothing matching is managed.
        """
        manager = cls._require()
        callbacks = manager._callbacks
        if target is None:
            return False
        if isinstance(target, str):
            callback = callbacks.pop(target, None)
            if callback is None:
                _log.warning("Callback doesn't exist: %s", target)
                return False
            callback.close()
            _log.info("Destroyed callback: %s", target)
            return True
        for name, callback in callbacks.items():
            if callback is target:
                _log.info("Destroyed callback: %s", name)
                del callbacks[name]
                callback.close()
                return True
        _log.warning("Callback isn't managed: %s", getattr(target, "name", target))
        return False

    @classmethod
    def clear(cls) -> None:
        """Close and forget every callback."""
        cls._require()._close_all()

    @classmethod
    def render(cls, target: Union[str, RenderCallback, None], *args: Any) -> None:
        """Render a callback given by name or by object; unknown names do nothing."""
        manager = cls._require()
        if isinstance(target, str):
            callback = manager._callbacks.get(target)
        else:
            callback = target
        if callback is not None:
            callback.render(*args)

    @classmethod
    def get(cls, name: str) -> Optional[RenderCallback]:
        """Return the callback registered as ``name``, or None."""
        callback = cls._require()._callbacks.get(name)
        if callback is None:
            _log.warning("Callback doesn't exist: %s", name)
        return callback