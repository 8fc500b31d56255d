"""Key, mouse button, modifier and action codes plus per-frame input state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import Dict

_SC = 1 << 30
_EXT = 1 << 29


class InputCategory(IntEnum):
    """Families of input codes."""

    KEYBOARD = 0
    MOUSE = 1
    KEY_MODIFIER = 2
    ACTION = 3


class Key(IntEnum):
    """Virtual key codes.

    Printable keys use their character code; others carry the scancode flag
    or the extended flag. Some media and application keys deliberately share
    the code of a plain key and are aliases of it.
    """

    UNKNOWN = 0x00
    RETURN = 0x0D
    ESCAPE = 0x1B
    BACKSPACE = 0x08
    TAB = 0x09
    SPACE = 0x20
    EXCLAIM = 0x21
    DBLAPOSTROPHE = 0x22
    HASH = 0x23
    DOLLAR = 0x24
    PERCENT = 0x25
    AMPERSAND = 0x26
    APOSTROPHE = 0x27
    LEFTPAREN = 0x28
    RIGHTPAREN = 0x29
    ASTERISK = 0x2A
    PLUS = 0x2B
    COMMA = 0x2C
    MINUS = 0x2D
    PERIOD = 0x2E
    SLASH = 0x2F
    DIGIT_0 = 0x30
    DIGIT_1 = 0x31
    DIGIT_2 = 0x32
    DIGIT_3 = 0x33
    DIGIT_4 = 0x34
    DIGIT_5 = 0x35
    DIGIT_6 = 0x36
    DIGIT_7 = 0x37
    DIGIT_8 = 0x38
    DIGIT_9 = 0x39
    COLON = 0x3A
    SEMICOLON = 0x3B
    LESS = 0x3C
    EQUALS = 0x3D
    GREATER = 0x3E
    QUESTION = 0x3F
    AT = 0x40
    LEFTBRACKET = 0x5B
    BACKSLASH = 0x5C
    RIGHTBRACKET = 0x5D
    CARET = 0x5E
    UNDERSCORE = 0x5F
    GRAVE = 0x60
    A = 0x61
    B = 0x62
    C = 0x63
    D = 0x64
    E = 0x65
    F = 0x66
    G = 0x67
    H = 0x68
    I = 0x69  # noqa: E741
    J = 0x6A
    K = 0x6B
    L = 0x6C
    M = 0x6D
    N = 0x6E
    O = 0x6F  # noqa: E741
    P = 0x70
    Q = 0x71
    R = 0x72
    S = 0x73
    T = 0x74
    U = 0x75
    V = 0x76
    W = 0x77
    X = 0x78
    Y = 0x79
    Z = 0x7A
    LEFTBRACE = 0x7B
    PIPE = 0x7C
    RIGHTBRACE = 0x7D
    TILDE = 0x7E
    DELETE = 0x7F
    PLUSMINUS = 0xB1
    CAPSLOCK = _SC | 57
    F1 = _SC | 58
    F2 = _SC | 59
    F3 = _SC | 60
    F4 = _SC | 61
    F5 = _SC | 62
    F6 = _SC | 63
    F7 = _SC | 64
    F8 = _SC | 65
    F9 = _SC | 66
    F10 = _SC | 67
    F11 = _SC | 68
    F12 = _SC | 69
    PRINTSCREEN = _SC | 70
    SCROLLLOCK = _SC | 71
    PAUSE = _SC | 72
    INSERT = _SC | 73
    HOME = _SC | 74
    PAGEUP = _SC | 75
    END = _SC | 77
    PAGEDOWN = _SC | 78
    RIGHT = _SC | 79
    LEFT = _SC | 80
    DOWN = _SC | 81
    UP = _SC | 82
    NUMLOCKCLEAR = _SC | 83
    KP_DIVIDE = _SC | 84
    KP_MULTIPLY = _SC | 85
    KP_MINUS = _SC | 86
    KP_PLUS = _SC | 87
    KP_ENTER = _SC | 88
    KP_1 = _SC | 89
    KP_2 = _SC | 90
    KP_3 = _SC | 91
    KP_4 = _SC | 92
    KP_5 = _SC | 93
    KP_6 = _SC | 94
    KP_7 = _SC | 95
    KP_8 = _SC | 96
    KP_9 = _SC | 97
    KP_0 = _SC | 98
    KP_PERIOD = _SC | 99
    APPLICATION = _SC | 101
    POWER = _SC | 102
    KP_EQUALS = _SC | 103
    F13 = _SC | 104
    F14 = _SC | 105
    F15 = _SC | 106
    F16 = _SC | 107
    F17 = _SC | 108
    F18 = _SC | 109
    F19 = _SC | 110
    F20 = _SC | 111
    F21 = _SC | 112
    F22 = _SC | 113
    F23 = _SC | 114
    F24 = _SC | 115
    EXECUTE = _SC | 116
    HELP = _SC | 117
    MENU = _SC | 118
    SELECT = _SC | 119
    STOP = _SC | 120
    AGAIN = _SC | 121
    UNDO = _SC | 122
    CUT = _SC | 123
    COPY = _SC | 124
    PASTE = _SC | 125
    FIND = _SC | 126
    MUTE = _SC | 127
    VOLUMEUP = _SC | 128
    VOLUMEDOWN = _SC | 129
    KP_COMMA = _SC | 133
    KP_EQUALSAS400 = _SC | 134
    ALTERASE = _SC | 153
    SYSREQ = _SC | 154
    CANCEL = _SC | 155
    CLEAR = _SC | 156
    PRIOR = _SC | 157
    RETURN2 = _SC | 158
    SEPARATOR = _SC | 159
    OUT = _SC | 160
    OPER = _SC | 161
    CLEARAGAIN = _SC | 162
    CRSEL = _SC | 163
    EXSEL = _SC | 164
    KP_00 = _SC | 176
    KP_000 = _SC | 177
    THOUSANDSSEPARATOR = _SC | 178
    DECIMALSEPARATOR = _SC | 179
    CURRENCYUNIT = _SC | 180
    CURRENCYSUBUNIT = _SC | 181
    KP_LEFTPAREN = _SC | 182
    KP_RIGHTPAREN = _SC | 183
    KP_LEFTBRACE = _SC | 184
    KP_RIGHTBRACE = _SC | 185
    KP_TAB = _SC | 186
    KP_BACKSPACE = _SC | 187
    KP_A = _SC | 188
    KP_B = _SC | 189
    KP_C = _SC | 190
    KP_D = _SC | 191
    KP_E = _SC | 192
    KP_F = _SC | 193
    KP_XOR = _SC | 194
    KP_POWER = _SC | 195
    KP_PERCENT = _SC | 196
    KP_LESS = _SC | 197
    KP_GREATER = _SC | 198
    KP_AMPERSAND = _SC | 199
    KP_DBLAMPERSAND = _SC | 200
    KP_VERTICALBAR = _SC | 201
    KP_DBLVERTICALBAR = _SC | 202
    KP_COLON = _SC | 203
    KP_HASH = _SC | 204
    KP_SPACE = _SC | 205
    KP_AT = _SC | 206
    KP_EXCLAM = _SC | 207
    KP_MEMSTORE = _SC | 208
    KP_MEMRECALL = _SC | 209
    KP_MEMCLEAR = _SC | 210
    KP_MEMADD = _SC | 211
    KP_MEMSUBTRACT = _SC | 212
    KP_MEMMULTIPLY = _SC | 213
    KP_MEMDIVIDE = _SC | 214
    KP_PLUSMINUS = _SC | 215
    KP_CLEAR = _SC | 216
    KP_CLEARENTRY = _SC | 217
    KP_BINARY = _SC | 218
    KP_OCTAL = _SC | 219
    KP_DECIMAL = _SC | 220
    KP_HEXADECIMAL = _SC | 221
    LCTRL = _SC | 224
    LSHIFT = _SC | 225
    LALT = _SC | 226
    LGUI = _SC | 227
    RCTRL = _SC | 228
    RSHIFT = _SC | 229
    RALT = _SC | 230
    RGUI = _SC | 231
    MODE = _SC | 257
    SLEEP = _SC | 258
    WAKE = _SC | 259
    CHANNEL_INCREMENT = _SC | 260
    CHANNEL_DECREMENT = _SC | 261
    MEDIA_PLAY = _SC | 262
    MEDIA_PAUSE = _SC | 72
    MEDIA_RECORD = _SC | 264
    MEDIA_FAST_FORWARD = _SC | 265
    MEDIA_REWIND = _SC | 266
    MEDIA_NEXT_TRACK = _SC | 267
    MEDIA_PREVIOUS_TRACK = _SC | 268
    MEDIA_STOP = _SC | 120
    MEDIA_EJECT = _SC | 270
    MEDIA_PLAY_PAUSE = _SC | 271
    MEDIA_SELECT = _SC | 119
    AC_NEW = _SC | 273
    AC_OPEN = _SC | 274
    AC_CLOSE = _SC | 275
    AC_EXIT = _SC | 276
    AC_SAVE = _SC | 277
    AC_PRINT = _SC | 278
    AC_PROPERTIES = _SC | 279
    AC_SEARCH = _SC | 280
    AC_HOME = _SC | 74
    AC_BACK = _SC | 282
    AC_FORWARD = _SC | 283
    AC_STOP = _SC | 120
    AC_REFRESH = _SC | 285
    AC_BOOKMARKS = _SC | 286
    SOFTLEFT = _SC | 287
    SOFTRIGHT = _SC | 288
    CALL = _SC | 289
    ENDCALL = _SC | 290
    LEFT_TAB = _EXT | 0x01
    LEVEL5_SHIFT = _EXT | 0x02
    MULTI_KEY_COMPOSE = _EXT | 0x03
    LMETA = _EXT | 0x04
    RMETA = _EXT | 0x05
    LHYPER = _EXT | 0x06
    RHYPER = _EXT | 0x07


class MouseButton(IntEnum):
    """Mouse button indices."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    X1 = 4
    X2 = 5


class KeyModifier(IntFlag):
    """Keyboard modifier bits; CTRL, SHIFT, ALT and GUI cover both sides."""

    NONE = 0x0000
    LSHIFT = 0x0001
    RSHIFT = 0x0002
    LEVEL5 = 0x0004
    LCTRL = 0x0040
    RCTRL = 0x0080
    LALT = 0x0100
    RALT = 0x0200
    LGUI = 0x0400
    RGUI = 0x0800
    NUM = 0x1000
    CAPS = 0x2000
    MODE = 0x4000
    SCROLL = 0x8000
    CTRL = LCTRL | RCTRL
    SHIFT = LSHIFT | RSHIFT
    ALT = LALT | RALT
    GUI = LGUI | RGUI


class Action(IntEnum):
    """What happened to a key or button."""

    RELEASE = -1
    NONE = 0
    PRESS = 1
    REPEAT = 2


@dataclass
class KeyboardState:
    """The last action seen for one key."""

    key: int = Key.UNKNOWN
    action: Action = Action.NONE
    modifiers: KeyModifier = KeyModifier.NONE


@dataclass
class MouseButtonState:
    """The last action seen for one mouse button."""

    action: Action = Action.NONE
    clicks: int = 0


@dataclass
class MouseCursor:
    """Cursor position, its previous value and the movement between them."""

    x_delta: float = 0.0
    y_delta: float = 0.0
    x_previous: float = -1.0
    y_previous: float = -1.0
    x_current: float = -1.0
    y_current: float = -1.0


@dataclass
class MouseScroll:
    """Scroll wheel movement."""

    x_delta: float = 0.0
    y_delta: float = 0.0


@dataclass
class Inputs:
    """Input state gathered from the events of one frame."""

    keyboard: Dict[int, KeyboardState] = field(default_factory=dict)
    mouse_button: Dict[int, MouseButtonState] = field(default_factory=dict)
    mouse_cursor: MouseCursor = field(default_factory=MouseCursor)
    mouse_scroll: MouseScroll = field(default_factory=MouseScroll)

    def reset_frame(self) -> None:
        """Forget key and button actions and zero all movement deltas."""
        self.keyboard.clear()
        self.mouse_button.clear()
        self.mouse_cursor.x_delta = 0.0
        self.mouse_cursor.y_delta = 0.0
        self.mouse_scroll.x_delta = 0.0
        self.mouse_scroll.y_delta = 0.0