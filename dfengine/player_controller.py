"""Base for objects that react to the broadcast input state."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .event_manager import INPUT, EventManager
from .input_types import Inputs


class PlayerController(ABC):
    """Receives input on the ``input`` event while it is active."""

    def __init__(self) -> None:
        self.active = False
        self.elapsed_time = 0.0

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def set_active(self, active: bool) -> None:
        """Start or stop receiving input."""
        self.active = bool(active)
        if self.active:
            EventManager.subscribe(INPUT, self, self.input)
        else:
            EventManager.unsubscribe(INPUT, self)

    def update(self, delta_time: float) -> None:
        """Advance the controller by ``delta_time`` seconds, keeping the total elapsed time."""
        self.elapsed_time += delta_time

    @abstractmethod
    def input(self, inputs: Inputs) -> None:
        """Handle the input state of one event."""