"""Display geometry and the 5x8 bitmap font for the PCD8544 LCD."""

from __future__ import annotations

MAX_X = 84
MAX_Y = 48
SCREEN_WIDTH = 84
SCREEN_HEIGHT = 48

# 0xA0 is lighter, 0xCF is darker.
CONTRAST = 0xB9

GLYPH_WIDTH = 5
FIRST_CODE = 0x20
LAST_CODE = 0x7F

# Each glyph is five column bytes; bit 0 is the top pixel row.
_FONT: tuple[bytes, ...] = (
    bytes((0x00, 0x00, 0x00, 0x00, 0x00)),  # 20 space
    bytes((0x00, 0x00, 0x5F, 0x00, 0x00)),  # 21 !
    bytes((0x00, 0x07, 0x00, 0x07, 0x00)),  # 22 "
    bytes((0x14, 0x7F, 0x14, 0x7F, 0x14)),  # 23 #
    bytes((0x24, 0x2A, 0x7F, 0x2A, 0x12)),  # 24 $
    bytes((0x23, 0x13, 0x08, 0x64, 0x62)),  # 25 %
    bytes((0x36, 0x49, 0x55, 0x22, 0x50)),  # 26 &
    bytes((0x00, 0x05, 0x03, 0x00, 0x00)),  # 27 '
    bytes((0x00, 0x1C, 0x22, 0x41, 0x00)),  # 28 (
    bytes((0x00, 0x41, 0x22, 0x1C, 0x00)),  # 29 )
    bytes((0x14, 0x08, 0x3E, 0x08, 0x14)),  # 2a *
    bytes((0x08, 0x08, 0x3E, 0x08, 0x08)),  # 2b +
    bytes((0x00, 0x50, 0x30, 0x00, 0x00)),  # 2c ,
    bytes((0x08, 0x08, 0x08, 0x08, 0x08)),  # 2d -
    bytes((0x00, 0x60, 0x60, 0x00, 0x00)),  # 2e .
    bytes((0x20, 0x10, 0x08, 0x04, 0x02)),  # 2f /
    bytes((0x3E, 0x51, 0x49, 0x45, 0x3E)),  # 30 0
    bytes((0x00, 0x42, 0x7F, 0x40, 0x00)),  # 31 1
    bytes((0x42, 0x61, 0x51, 0x49, 0x46)),  # 32 2
    bytes((0x21, 0x41, 0x45, 0x4B, 0x31)),  # 33 3
    bytes((0x18, 0x14, 0x12, 0x7F, 0x10)),  # 34 4
    bytes((0x27, 0x45, 0x45, 0x45, 0x39)),  # 35 5
    bytes((0x3C, 0x4A, 0x49, 0x49, 0x30)),  # 36 6
    bytes((0x01, 0x71, 0x09, 0x05, 0x03)),  # 37 7
    bytes((0x36, 0x49, 0x49, 0x49, 0x36)),  # 38 8
    bytes((0x06, 0x49, 0x49, 0x29, 0x1E)),  # 39 9
    bytes((0x00, 0x36, 0x36, 0x00, 0x00)),  # 3a :
    bytes((0x00, 0x56, 0x36, 0x00, 0x00)),  # 3b ;
    bytes((0x08, 0x14, 0x22, 0x41, 0x00)),  # 3c <
    bytes((0x14, 0x14, 0x14, 0x14, 0x14)),  # 3d =
    bytes((0x00, 0x41, 0x22, 0x14, 0x08)),  # 3e >
    bytes((0x02, 0x01, 0x51, 0x09, 0x06)),  # 3f ?
    bytes((0x32, 0x49, 0x79, 0x41, 0x3E)),  # 40 @
    bytes((0x7E, 0x11, 0x11, 0x11, 0x7E)),  # 41 A
    bytes((0x7F, 0x49, 0x49, 0x49, 0x36)),  # 42 B
    bytes((0x3E, 0x41, 0x41, 0x41, 0x22)),  # 43 C
    bytes((0x7F, 0x41, 0x41, 0x22, 0x1C)),  # 44 D
    bytes((0x7F, 0x49, 0x49, 0x49, 0x41)),  # 45 E
    bytes((0x7F, 0x09, 0x09, 0x09, 0x01)),  # 46 F
    bytes((0x3E, 0x41, 0x49, 0x49, 0x7A)),  # 47 G
    bytes((0x7F, 0x08, 0x08, 0x08, 0x7F)),  # 48 H
    bytes((0x00, 0x41, 0x7F, 0x41, 0x00)),  # 49 I
    bytes((0x20, 0x40, 0x41, 0x3F, 0x01)),  # 4a J
    bytes((0x7F, 0x08, 0x14, 0x22, 0x41)),  # 4b K
    bytes((0x7F, 0x40, 0x40, 0x40, 0x40)),  # 4c L
    bytes((0x7F, 0x02, 0x0C, 0x02, 0x7F)),  # 4d M
    bytes((0x7F, 0x04, 0x08, 0x10, 0x7F)),  # 4e N
    bytes((0x3E, 0x41, 0x41, 0x41, 0x3E)),  # 4f O
    bytes((0x7F, 0x09, 0x09, 0x09, 0x06)),  # 50 P
    bytes((0x3E, 0x41, 0x51, 0x21, 0x5E)),  # 51 Q
    bytes((0x7F, 0x09, 0x19, 0x29, 0x46)),  # 52 R
    bytes((0x46, 0x49, 0x49, 0x49, 0x31)),  # 53 S
    bytes((0x01, 0x01, 0x7F, 0x01, 0x01)),  # 54 T
    bytes((0x3F, 0x40, 0x40, 0x40, 0x3F)),  # 55 U
    bytes((0x1F, 0x20, 0x40, 0x20, 0x1F)),  # 56 V
    bytes((0x3F, 0x40, 0x38, 0x40, 0x3F)),  # 57 W
    bytes((0x63, 0x14, 0x08, 0x14, 0x63)),  # 58 X
    bytes((0x07, 0x08, 0x70, 0x08, 0x07)),  # 59 Y
    bytes((0x61, 0x51, 0x49, 0x45, 0x43)),  # 5a Z
    bytes((0x00, 0x7F, 0x41, 0x41, 0x00)),  # 5b [
    bytes((0x02, 0x04, 0x08, 0x10, 0x20)),  # 5c backslash
    bytes((0x00, 0x41, 0x41, 0x7F, 0x00)),  # 5d ]
    bytes((0x04, 0x02, 0x01, 0x02, 0x04)),  # 5e ^
    bytes((0x40, 0x40, 0x40, 0x40, 0x40)),  # 5f _
    bytes((0x00, 0x01, 0x02, 0x04, 0x00)),  # 60 `
    bytes((0x20, 0x54, 0x54, 0x54, 0x78)),  # 61 a
    bytes((0x7F, 0x48, 0x44, 0x44, 0x38)),  # 62 b
    bytes((0x38, 0x44, 0x44, 0x44, 0x20)),  # 63 c
    bytes((0x38, 0x44, 0x44, 0x48, 0x7F)),  # 64 d
    bytes((0x38, 0x54, 0x54, 0x54, 0x18)),  # 65 e
    bytes((0x08, 0x7E, 0x09, 0x01, 0x02)),  # 66 f
    bytes((0x0C, 0x52, 0x52, 0x52, 0x3E)),  # 67 g
    bytes((0x7F, 0x08, 0x04, 0x04, 0x78)),  # 68 h
    bytes((0x00, 0x44, 0x7D, 0x40, 0x00)),  # 69 i
    bytes((0x20, 0x40, 0x44, 0x3D, 0x00)),  # 6a j
    bytes((0x7F, 0x10, 0x28, 0x44, 0x00)),  # 6b k
    bytes((0x00, 0x41, 0x7F, 0x40, 0x00)),  # 6c l
    bytes((0x7C, 0x04, 0x18, 0x04, 0x78)),  # 6d m
    bytes((0x7C, 0x08, 0x04, 0x04, 0x78)),  # 6e n
    bytes((0x38, 0x44, 0x44, 0x44, 0x38)),  # 6f o
    bytes((0x7C, 0x14, 0x14, 0x14, 0x08)),  # 70 p
    bytes((0x08, 0x14, 0x14, 0x18, 0x7C)),  # 71 q
    bytes((0x7C, 0x08, 0x04, 0x04, 0x08)),  # 72 r
    bytes((0x48, 0x54, 0x54, 0x54, 0x20)),  # 73 s
    bytes((0x04, 0x3F, 0x44, 0x40, 0x20)),  # 74 t
    bytes((0x3C, 0x40, 0x40, 0x20, 0x7C)),  # 75 u
    bytes((0x1C, 0x20, 0x40, 0x20, 0x1C)),  # 76 v
    bytes((0x3C, 0x40, 0x30, 0x40, 0x3C)),  # 77 w
    bytes((0x44, 0x28, 0x10, 0x28, 0x44)),  # 78 x
    bytes((0x0C, 0x50, 0x50, 0x50, 0x3C)),  # 79 y
    bytes((0x44, 0x64, 0x54, 0x4C, 0x44)),  # 7a z
    bytes((0x00, 0x08, 0x36, 0x41, 0x00)),  # 7b {
    bytes((0x00, 0x00, 0x7F, 0x00, 0x00)),  # 7c |
    bytes((0x00, 0x41, 0x36, 0x08, 0x00)),  # 7d }
    bytes((0x10, 0x08, 0x08, 0x10, 0x08)),  # 7e ~
    bytes((0x1F, 0x24, 0x7C, 0x24, 0x1F)),  # 7f UT sign
)


def glyph(char: str | int) -> bytes:
    """Return the five column bytes for a character or character code.

    Codes 0x20 to 0x7F are supported; 0x7F draws the UT sign.
    """
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        code = ord(char)
    elif isinstance(char, int) and not isinstance(char, bool):
        code = char
    else:
        raise TypeError(f"expected a character or an int, got {type(char).__name__}")
    if not FIRST_CODE <= code <= LAST_CODE:
        raise ValueError(f"character code {code:#x} has no glyph")
    return _FONT[code - FIRST_CODE]