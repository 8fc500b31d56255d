"""Base class that keeps a single live instance per subclass."""

from __future__ import annotations

import logging
from typing import Any, Optional, Type, TypeVar

_log = logging.getLogger(__name__)

_S = TypeVar("_S", bound="Singleton")


class SingletonError(RuntimeError):
    """Raised when a singleton is initialized twice or used while absent."""


class Singleton:
    """Keeps one instance per subclass, created and destroyed explicitly.

    Subclasses may override ``_teardown`` to release what they hold when
    the instance is deinitialized.
    """

    _instance: Optional["Singleton"] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._instance = None

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def _teardown(self) -> None:
        """Release resources held by the instance; called on deinitialize."""

    @classmethod
    def initialize(cls: Type[_S], *args: Any, **kwargs: Any) -> _S:
        """Create the instance of this class, passing the arguments on."""
        if cls._instance is not None:
            _log.error("Singleton already initialized")
            raise SingletonError(f"{cls.__name__} is already initialized")
        instance = cls(*args, **kwargs)
        cls._instance = instance
        _log.info("Initialized singleton")
        return instance

    @classmethod
    def deinitialize(cls) -> None:
        """Tear down and forget the instance of this class."""
        instance = cls._instance
        if instance is None:
            _log.error("No singleton initialized")
            raise SingletonError(f"{cls.__name__} is not initialized")
        try:
            instance._teardown()
        finally:
            cls._instance = None
        _log.info("Deinitialized singleton")

    @classmethod
    def instance(cls: Type[_S]) -> Optional[_S]:
        """Return the live instance, or None when there is none."""
        return cls._instance  # type: ignore[return-value]

    @classmethod
    def _require(cls: Type[_S]) -> _S:
        instance = cls._instance
        if instance is None:
            raise SingletonError(f"{cls.__name__} is not initialized")
        return instance  # type: ignore[return-value]