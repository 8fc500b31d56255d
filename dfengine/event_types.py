"""Numeric identifiers of platform events, grouped by category."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Type


class EventCategory(IntEnum):
    """Families into which platform events are grouped."""

    APPLICATION = 0
    DISPLAY = 1
    WINDOW = 2
    KEYBOARD = 3
    MOUSE = 4
    JOYSTICK = 5
    GAMEPAD = 6
    TOUCH = 7
    CLIPBOARD = 8
    DRAG_DROP = 9
    AUDIO_DEVICE = 10
    SENSOR = 11
    PEN = 12
    CAMERA_DEVICE = 13
    RENDER = 14


class ApplicationEvent(IntEnum):
    """Application lifecycle events."""

    QUIT = 0x100
    TERMINATING = 0x101
    LOW_MEMORY = 0x102
    WILL_ENTER_BACKGROUND = 0x103
    DID_ENTER_BACKGROUND = 0x104
    WILL_ENTER_FOREGROUND = 0x105
    DID_ENTER_FOREGROUND = 0x106
    LOCALE_CHANGED = 0x107
    SYSTEM_THEME_CHANGED = 0x108


class DisplayEvent(IntEnum):
    """Display events; FIRST and LAST bound the range."""

    DISPLAY_ORIENTATION = 0x151
    DISPLAY_ADDED = 0x152
    DISPLAY_REMOVED = 0x153
    DISPLAY_MOVED = 0x154
    DISPLAY_DESKTOP_MODE_CHANGED = 0x155
    DISPLAY_CURRENT_MODE_CHANGED = 0x156
    DISPLAY_CONTENT_SCALE_CHANGED = 0x157
    DISPLAY_FIRST = 0x151
    DISPLAY_LAST = 0x157


class WindowEvent(IntEnum):
    """Window events; FIRST and LAST bound the range."""

    WINDOW_SHOWN = 0x202
    WINDOW_HIDDEN = 0x203
    WINDOW_EXPOSED = 0x204
    WINDOW_MOVED = 0x205
    WINDOW_RESIZED = 0x206
    WINDOW_PIXEL_SIZE_CHANGED = 0x207
    WINDOW_METAL_VIEW_RESIZED = 0x208
    WINDOW_MINIMIZED = 0x209
    WINDOW_MAXIMIZED = 0x20A
    WINDOW_RESTORED = 0x20B
    WINDOW_MOUSE_ENTER = 0x20C
    WINDOW_MOUSE_LEAVE = 0x20D
    WINDOW_FOCUS_GAINED = 0x20E
    WINDOW_FOCUS_LOST = 0x20F
    WINDOW_CLOSE_REQUESTED = 0x210
    WINDOW_HIT_TEST = 0x211
    WINDOW_ICCPROF_CHANGED = 0x212
    WINDOW_DISPLAY_CHANGED = 0x213
    WINDOW_DISPLAY_SCALE_CHANGED = 0x214
    WINDOW_SAFE_AREA_CHANGED = 0x215
    WINDOW_OCCLUDED = 0x216
    WINDOW_ENTER_FULLSCREEN = 0x217
    WINDOW_LEAVE_FULLSCREEN = 0x218
    WINDOW_DESTROYED = 0x219
    WINDOW_HDR_STATE_CHANGED = 0x21A
    WINDOW_FIRST = 0x202
    WINDOW_LAST = 0x21A


class KeyboardEvent(IntEnum):
    """Keyboard and text input events."""

    KEY_DOWN = 0x300
    KEY_UP = 0x301
    TEXT_EDITING = 0x302
    TEXT_INPUT = 0x303
    KEYMAP_CHANGED = 0x304
    KEYBOARD_ADDED = 0x305
    KEYBOARD_REMOVED = 0x306
    TEXT_EDITING_CANDIDATES = 0x307


class MouseEvent(IntEnum):
    """Mouse events."""

    MOUSE_MOTION = 0x400
    MOUSE_BUTTON_DOWN = 0x401
    MOUSE_BUTTON_UP = 0x402
    MOUSE_WHEEL = 0x403
    MOUSE_ADDED = 0x404
    MOUSE_REMOVED = 0x405


class JoystickEvent(IntEnum):
    """Joystick events."""

    JOYSTICK_AXIS_MOTION = 0x600
    JOYSTICK_BALL_MOTION = 0x601
    JOYSTICK_HAT_MOTION = 0x602
    JOYSTICK_BUTTON_DOWN = 0x603
    JOYSTICK_BUTTON_UP = 0x604
    JOYSTICK_ADDED = 0x605
    JOYSTICK_REMOVED = 0x606
    JOYSTICK_BATTERY_UPDATED = 0x607
    JOYSTICK_UPDATE_COMPLETE = 0x608


class GamepadEvent(IntEnum):
    """Gamepad events."""

    GAMEPAD_AXIS_MOTION = 0x650
    GAMEPAD_BUTTON_DOWN = 0x651
    GAMEPAD_BUTTON_UP = 0x652
    GAMEPAD_ADDED = 0x653
    GAMEPAD_REMOVED = 0x654
    GAMEPAD_REMAPPED = 0x655
    GAMEPAD_TOUCHPAD_DOWN = 0x656
    GAMEPAD_TOUCHPAD_MOTION = 0x657
    GAMEPAD_TOUCHPAD_UP = 0x658
    GAMEPAD_SENSOR_UPDATE = 0x659
    GAMEPAD_UPDATE_COMPLETE = 0x65A
    GAMEPAD_STEAM_HANDLE_UPDATED = 0x65B


class TouchEvent(IntEnum):
    """Touch events."""

    FINGER_DOWN = 0x700
    FINGER_UP = 0x701
    FINGER_MOTION = 0x702
    FINGER_CANCELED = 0x703


class ClipboardEvent(IntEnum):
    """Clipboard events."""

    CLIPBOARD_UPDATE = 0x900


class DragDropEvent(IntEnum):
    """Drag-and-drop events."""

    DROP_FILE = 0x1000
    DROP_TEXT = 0x1001
    DROP_BEGIN = 0x1002
    DROP_COMPLETE = 0x1003
    DROP_POSITION = 0x1004


class AudioDeviceEvent(IntEnum):
    """Audio device hot-plug events."""

    AUDIO_DEVICE_ADDED = 0x1100
    AUDIO_DEVICE_REMOVED = 0x1101
    AUDIO_DEVICE_FORMAT_CHANGED = 0x1102


class SensorEvent(IntEnum):
    """Sensor events."""

    SENSOR_UPDATE = 0x1200


class PenEvent(IntEnum):
    """Pen events."""

    PEN_PROXIMITY_IN = 0x1300
    PEN_PROXIMITY_OUT = 0x1301
    PEN_DOWN = 0x1302
    PEN_UP = 0x1303
    PEN_BUTTON_DOWN = 0x1304
    PEN_BUTTON_UP = 0x1305
    PEN_MOTION = 0x1306
    PEN_AXIS = 0x1307


class CameraDeviceEvent(IntEnum):
    """Camera device events."""

    CAMERA_DEVICE_ADDED = 0x1400
    CAMERA_DEVICE_REMOVED = 0x1401
    CAMERA_DEVICE_APPROVED = 0x1402
    CAMERA_DEVICE_DENIED = 0x1403


class RenderEvent(IntEnum):
    """Render target and device events."""

    RENDER_TARGETS_RESET = 0x2000
    RENDER_DEVICE_RESET = 0x2001
    RENDER_DEVICE_LOST = 0x2002


_BY_CATEGORY: Dict[EventCategory, Type[IntEnum]] = {
    EventCategory.APPLICATION: ApplicationEvent,
    EventCategory.DISPLAY: DisplayEvent,
    EventCategory.WINDOW: WindowEvent,
    EventCategory.KEYBOARD: KeyboardEvent,
    EventCategory.MOUSE: MouseEvent,
    EventCategory.JOYSTICK: JoystickEvent,
    EventCategory.GAMEPAD: GamepadEvent,
    EventCategory.TOUCH: TouchEvent,
    EventCategory.CLIPBOARD: ClipboardEvent,
    EventCategory.DRAG_DROP: DragDropEvent,
    EventCategory.AUDIO_DEVICE: AudioDeviceEvent,
    EventCategory.SENSOR: SensorEvent,
    EventCategory.PEN: PenEvent,
    EventCategory.CAMERA_DEVICE: CameraDeviceEvent,
    EventCategory.RENDER: RenderEvent,
}


def events_of(category: int) -> Type[IntEnum]:
    """Return the enumeration of event types belonging to ``category``."""
    return _BY_CATEGORY[EventCategory(category)]


def category_of(event_type: int) -> EventCategory:
    """Return the category an event type number belongs to."""
    value = int(event_type)
    for category, enum_type in _BY_CATEGORY.items():
        if value in enum_type._value2member_map_:
            return category
    raise ValueError(f"unknown event type: {value:#x}")