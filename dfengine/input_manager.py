"""Turns platform input events into per-frame input state and broadcasts it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Union, overload

from .event_manager import INPUT, EventManager
from .event_types import ApplicationEvent, WindowEvent
from .input_types import (
    Action,
    Inputs,
    KeyboardState,
    KeyModifier,
    MouseButtonState,
)
from .singleton import Singleton

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyInput:
    """A key went down, came up or auto-repeated."""

    key: int
    down: bool
    repeat: bool = False
    modifiers: int = KeyModifier.NONE


@dataclass(frozen=True)
class ButtonInput:
    """A mouse button went down or came up."""

    button: int
    down: bool
    clicks: int = 1


@dataclass(frozen=True)
class MotionInput:
    """The mouse cursor moved to ``(x, y)`` by ``(xrel, yrel)``."""

    x: float
    y: float
    xrel: float = 0.0
    yrel: float = 0.0


@dataclass(frozen=True)
class WheelInput:
    """The scroll wheel moved."""

    x: float
    y: float


@dataclass(frozen=True)
class SystemInput:
    """Any other platform event, identified by its event type number."""

    type: int


InputEvent = Union[KeyInput, ButtonInput, MotionInput, WheelInput, SystemInput]


class InputManager(Singleton):
    """Collects input state from events and publishes it on the ``input`` event.

    After each handled event the current state is passed to the subscribers
    of the ``input`` event and the per-frame parts of it are reset.
    """

    def __init__(
        self,
        on_quit: Optional[Callable[[], None]] = None,
        on_window_minimized: Optional[Callable[[bool], None]] = None,
        on_window_resized: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._inputs = Inputs()
        self._on_quit = on_quit
        self._on_window_minimized = on_window_minimized
        self._on_window_resized = on_window_resized
        self.quit_requested = False
        self.window_minimized = False
        self.window_resized = False

    @classmethod
    def inputs(cls) -> Inputs:
        """Return the live input state."""
        return cls._require()._inputs

    @classmethod
    def update(cls, events: Iterable[InputEvent]) -> None:
        """Process ``events`` in order, broadcasting the state after each one."""
        manager = cls._require()
        for event in events:
            if not manager._handle(event):
                continue
            if EventManager.instance() is not None:
                EventManager.invoke(INPUT, manager._inputs)
            manager._inputs.reset_frame()

    @overload
    @classmethod
    def check_key(cls, key: int) -> Action: ...

    @overload
    @classmethod
    def check_key(cls, key: int, action: Action) -> bool: ...

    @classmethod
    def check_key(cls, key, action=None):
        """Return the action of ``key``, or whether it equals ``action``."""
        state = cls._require()._inputs.keyboard.get(key)
        current = state.action if state is not None else Action.NONE
        if action is None:
            return current
        return state is not None and current == action

    @overload
    @classmethod
    def check_button(cls, button: int) -> Action: ...

    @overload
    @classmethod
    def check_button(cls, button: int, action: Action) -> bool: ...

    @classmethod
    def check_button(cls, button, action=None):
        """Return the action of ``button``, or whether it equals ``action``."""
        state = cls._require()._inputs.mouse_button.get(button)
        current = state.action if state is not None else Action.NONE
        if action is None:
            return current
        return state is not None and current == action

    def _handle(self, event: InputEvent) -> bool:
        if isinstance(event, KeyInput):
            self._key(event)
        elif isinstance(event, ButtonInput):
            self._button(event)
        elif isinstance(event, MotionInput):
            self._motion(event)
        elif isinstance(event, WheelInput):
            self._wheel(event)
        elif isinstance(event, SystemInput):
            return self._system(event)
        else:
            raise TypeError(f"unsupported input event: {type(event).__name__}")
        return True

    def _system(self, event: SystemInput) -> bool:
        kind = int(event.type)
        if kind == ApplicationEvent.QUIT:
            self.quit_requested = True
            if self._on_quit is not None:
                self._on_quit()
        elif kind == WindowEvent.WINDOW_MINIMIZED:
            self._set_minimized(True)
        elif kind == WindowEvent.WINDOW_RESTORED:
            self._set_minimized(False)
        elif kind == WindowEvent.WINDOW_RESIZED:
            self.window_resized = True
            if self._on_window_resized is not None:
                self._on_window_resized(True)
        else:
            return False
        return True

    def _set_minimized(self, minimized: bool) -> None:
        self.window_minimized = minimized
        if self._on_window_minimized is not None:
            self._on_window_minimized(minimized)

    def _key(self, event: KeyInput) -> None:
        if event.repeat:
            action = Action.REPEAT
        elif event.down:
            action = Action.PRESS
        else:
            action = Action.RELEASE
        self._inputs.keyboard[event.key] = KeyboardState(
            key=event.key,
            action=action,
            modifiers=KeyModifier(int(event.modifiers)),
        )

    def _button(self, event: ButtonInput) -> None:
        action = Action.PRESS if event.down else Action.RELEASE
        self._inputs.mouse_button[event.button] = MouseButtonState(action=action, clicks=event.clicks)

    def _motion(self, event: MotionInput) -> None:
        cursor = self._inputs.mouse_cursor
        cursor.x_delta = float(event.xrel)
        cursor.y_delta = float(event.yrel)
        cursor.x_previous = cursor.x_current
        cursor.y_previous = cursor.y_current
        cursor.x_current = float(event.x)
        cursor.y_current = float(event.y)

    def _wheel(self, event: WheelInput) -> None:
        scroll = self._inputs.mouse_scroll
        scroll.x_delta = float(event.x)
        scroll.y_delta = float(event.y)