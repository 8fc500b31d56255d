"""Core building blocks of a small game engine: singletons, events, input, transforms, timers, colours and render callbacks."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "event_manager",
    "event_types",
    "events",
    "input_manager",
    "input_types",
    "player_controller",
    "render_callback",
    "render_callback_manager",
    "singleton",
    "timer",
    "transform",
    "window_types",
]