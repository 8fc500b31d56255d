"""Window creation flags."""

from __future__ import annotations

import re
from enum import IntFlag
from typing import Iterable, Union


class WindowFlag(IntFlag):
    """Flags a window may be created with or report."""

    NONE = 0
    FULLSCREEN = 0x00000001
    OPENGL = 0x00000002
    OCCLUDED = 0x00000004
    HIDDEN = 0x00000008
    BORDERLESS = 0x00000010
    RESIZABLE = 0x00000020
    MINIMIZED = 0x00000040
    MAXIMIZED = 0x00000080
    MOUSE_GRABBED = 0x00000100
    INPUT_FOCUS = 0x00000200
    MOUSE_FOCUS = 0x00000400
    EXTERNAL = 0x00000800
    MODAL = 0x00001000
    HIGH_PIXEL_DENSITY = 0x00002000
    MOUSE_CAPTURE = 0x00004000
    MOUSE_RELATIVE_MODE = 0x00008000
    ALWAYS_ON_TOP = 0x00010000
    UTILITY = 0x00020000
    TOOLTIP = 0x00040000
    POPUP_MENU = 0x00080000
    KEYBOARD_GRABBED = 0x00100000
    VULKAN = 0x10000000
    METAL = 0x20000000
    TRANSPARENT = 0x40000000
    NOT_FOCUSABLE = 0x80000000


def parse_flags(names: Union[str, Iterable[str]]) -> WindowFlag:
    """Combine flags given by name.

    ``names`` is an iterable of names or one string of names separated by
    ``|``, commas or whitespace. Case and ``-`` versus ``_`` do not matter.
    """
    if isinstance(names, str):
        names = [part for part in re.split(r"[|,\s]+", names) if part]
    result = WindowFlag.NONE
    for name in names:
        key = name.strip().upper().replace("-", "_")
        try:
            result |= WindowFlag[key]
        except KeyError:
            raise ValueError(f"unknown window flag: {name!r}") from None
    return result