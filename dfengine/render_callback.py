"""A named callback that renders each of the data items it owns."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, List, TypeVar, Union

_T = TypeVar("_T")


class RenderCallback(Generic[_T]):
    """Builds one data item per source and renders them with a callback.

    ``sources`` is a single source or a list or tuple of sources; ``factory``
    turns each into a data item. ``render`` calls ``callback(item, *args)``
    for every item in order. Items that have a ``close`` method are closed
    when the callback is closed.
    """

    def __init__(
        self,
        name: str,
        sources: Union[Any, Iterable[Any]],
        factory: Callable[[Any], _T],
        callback: Callable[..., Any],
    ) -> None:
        self._name = name
        self._callback = callback
        items = sources if isinstance(sources, (list, tuple)) else [sources]
        self._data: List[_T] = [factory(source) for source in items]

    @property
    def name(self) -> str:
        """The name the callback was created with."""
        return self._name

    @property
    def data(self) -> List[_T]:
        """The data items, in the order of their sources."""
        return list(self._data)

    def __enter__(self) -> "RenderCallback[_T]":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def render(self, *args: Any) -> None:
        """Call the callback for every data item with ``args``."""
        for item in self._data:
            self._callback(item, *args)

    def close(self) -> None:
        """Release every data item; the callback renders nothing afterwards."""
        data, self._data = self._data, []
        for item in data:
            close = getattr(item, "close", None)
            if callable(close):
                close()