"""A simulated Nokia 5110 (PCD8544) 84x48 monochrome LCD with a frame buffer."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from stormcastle.font import CONTRAST, MAX_X, MAX_Y, SCREEN_HEIGHT, SCREEN_WIDTH, glyph

BANKS = MAX_Y // 8
BUFFER_SIZE = SCREEN_WIDTH * SCREEN_HEIGHT // 8
CHAR_WIDTH = 7
TEXT_COLUMNS = MAX_X // CHAR_WIDTH
TEXT_ROWS = BANKS
MAX_THRESHOLD = 14

_INIT_SEQUENCE_TAIL = (0x04, 0x14, 0x20, 0x0C)
_BMP_OFFSET_FIELD = 10
_BMP_WIDTH_FIELD = 18
_BMP_HEIGHT_FIELD = 22


class WriteType(Enum):
    """Whether a byte sent to the controller is a command or display data."""

    COMMAND = "command"
    DATA = "data"


class Nokia5110:
    """The LCD controller, its display RAM, and a RAM-side screen buffer.

    Every byte sent to the controller is recorded in ``transmissions``.
    ``buffer`` holds the next image, composed with :meth:`print_bmp` and
    shown with :meth:`display_buffer`.
    """

    def __init__(self, contrast: int = CONTRAST) -> None:
        if not 0x80 <= contrast <= 0xFF:
            raise ValueError(f"contrast must be between 0x80 and 0xFF, got {contrast:#x}")
        self.contrast = contrast
        self.buffer = bytearray(BUFFER_SIZE)
        self.ram = bytearray(BUFFER_SIZE)
        self.transmissions: list[tuple[WriteType, int]] = []
        self._reset_registers()

    def _reset_registers(self) -> None:
        self._x = 0
        self._y = 0
        self.power_down = True
        self.vertical = False
        self.extended = False
        self.display_mode = "blank"
        self.vop = 0
        self.bias = 0
        self.temperature_coefficient = 0

    @property
    def cursor(self) -> tuple[int, int]:
        """The controller's address pointer as (column, bank)."""
        return (self._x, self._y)

    def init(self) -> None:
        """Reset the controller and send the power-up command sequence."""
        self._reset_registers()
        self.write(WriteType.COMMAND, 0x21)
        self.write(WriteType.COMMAND, self.contrast)
        for command in _INIT_SEQUENCE_TAIL:
            self.write(WriteType.COMMAND, command)

    def write(self, kind: WriteType, message: int) -> None:
        """Send one byte to the controller as a command or as display data."""
        kind = WriteType(kind)
        byte = message & 0xFF
        if kind is WriteType.COMMAND:
            self._command(byte)
        else:
            self._data(byte)
        self.transmissions.append((kind, byte))

    def _command(self, byte: int) -> None:
        if byte & 0xF8 == 0x20:
            self.power_down = bool(byte & 0x04)
            self.vertical = bool(byte & 0x02)
            self.extended = bool(byte & 0x01)
        elif self.extended:
            if byte & 0x80:
                self.vop = byte & 0x7F
            elif byte & 0xF8 == 0x10:
                self.bias = byte & 0x07
            elif byte & 0xFC == 0x04:
                self.temperature_coefficient = byte & 0x03
        elif byte & 0x80:
            x = byte & 0x7F
            if x >= MAX_X:
                raise ValueError(f"column {x} is beyond the display")
            self._x = x
        elif byte & 0xF8 == 0x40:
            y = byte & 0x07
            if y >= BANKS:
                raise ValueError(f"bank {y} is beyond the display")
            self._y = y
        elif byte & 0xF8 == 0x08:
            mode = (bool(byte & 0x04), bool(byte & 0x01))
            self.display_mode = {
                (False, False): "blank",
                (True, False): "normal",
                (False, True): "all_on",
                (True, True): "inverse",
            }[mode]

    def _data(self, byte: int) -> None:
        self.ram[self._y * MAX_X + self._x] = byte
        if self.vertical:
            self._y += 1
            if self._y == BANKS:
                self._y = 0
                self._x = (self._x + 1) % MAX_X
        else:
            self._x += 1
            if self._x == MAX_X:
                self._x = 0
                self._y = (self._y + 1) % BANKS

    def out_char(self, char: str | int) -> None:
        """Print one character at the cursor, padded by a blank column each side."""
        columns = glyph(char)
        self.write(WriteType.DATA, 0x00)
        for column in columns:
            self.write(WriteType.DATA, column)
        self.write(WriteType.DATA, 0x00)

    def out_string(self, text: str) -> None:
        """Print a string; it wraps at the end of each row."""
        for char in text:
            self.out_char(char)

    def out_udec(self, n: int) -> None:
        """Print a 16-bit unsigned number right-justified in five characters."""
        if not 0 <= n <= 0xFFFF:
            raise ValueError(f"{n} is not a 16-bit unsigned number")
        self.out_string(f"{n:>5}")

    def set_cursor(self, x: int, y: int) -> None:
        """Move to text column x (0-11) and row y (0-5); other positions are ignored."""
        if not (0 <= x < TEXT_COLUMNS and 0 <= y < TEXT_ROWS):
            return
        self.write(WriteType.COMMAND, 0x80 | (x * CHAR_WIDTH))
        self.write(WriteType.COMMAND, 0x40 | y)

    def clear(self) -> None:
        """Blank the whole display and move the cursor to the top left."""
        for _ in range(BUFFER_SIZE):
            self.write(WriteType.DATA, 0x00)
        self.set_cursor(0, 0)

    def draw_full_image(self, image: Iterable[int]) -> None:
        """Fill the display with a 504-byte image in bank order."""
        data = bytes(image)
        if len(data) < BUFFER_SIZE:
            raise ValueError(f"image needs {BUFFER_SIZE} bytes, got {len(data)}")
        self.set_cursor(0, 0)
        for byte in data[:BUFFER_SIZE]:
            self.write(WriteType.DATA, byte)

    def print_bmp(self, xpos: int, ypos: int, bmp: Iterable[int], threshold: int = 0) -> bool:
        """Draw a 4-bit BMP into the buffer with its bottom-left corner at (xpos, ypos).

        A pixel is on when its grey level exceeds ``threshold`` (capped at 14).
        Returns False, drawing nothing, when the image would be cut off or has
        an odd width or no rows.
        """
        if threshold < 0:
            raise ValueError("threshold must not be negative")
        data = bytes(bmp)
        if len(data) <= _BMP_HEIGHT_FIELD:
            raise ValueError("bitmap is too short to hold a header")
        width = data[_BMP_WIDTH_FIELD]
        height = data[_BMP_HEIGHT_FIELD]
        if (
            height <= 0
            or width % 2 != 0
            or xpos < 0
            or xpos + width > SCREEN_WIDTH
            or ypos < height - 1
            or ypos > SCREEN_HEIGHT
        ):
            return False
        threshold = min(threshold, MAX_THRESHOLD)
        bytes_per_row = width // 2
        stride = bytes_per_row + (-bytes_per_row) % 4
        offset = data[_BMP_OFFSET_FIELD]
        if len(data) < offset + stride * (height - 1) + bytes_per_row:
            raise ValueError("bitmap is too short for its declared size")
        # Rows are stored bottom to top; each byte holds two pixels, left one high.
        for row in range(height):
            y = ypos - row
            start = offset + row * stride
            for col, byte in enumerate(data[start:start + bytes_per_row]):
                x = xpos + 2 * col
                self._plot(x, y, (byte >> 4) & 0xF > threshold)
                self._plot(x + 1, y, byte & 0xF > threshold)
        return True

    def _plot(self, x: int, y: int, on: bool) -> None:
        if not (0 <= x < SCREEN_WIDTH and 0 <= y < SCREEN_HEIGHT):
            return
        index = (y // 8) * SCREEN_WIDTH + x
        mask = 1 << (y % 8)
        if on:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def clear_buffer(self) -> None:
        """Zero the screen buffer."""
        self.buffer[:] = bytes(BUFFER_SIZE)

    def display_buffer(self) -> None:
        """Send the screen buffer to the display."""
        self.draw_full_image(self.buffer)

    def pixel(self, x: int, y: int) -> bool:
        """Return whether the display RAM has pixel (x, y) set."""
        if not (0 <= x < MAX_X and 0 <= y < MAX_Y):
            raise IndexError(f"pixel ({x}, {y}) is off the display")
        return bool(self.ram[(y // 8) * MAX_X + x] >> (y % 8) & 1)

    def render(self) -> str:
        """Return what the panel shows, one line per pixel row, '#' on and '.' off."""
        def shown(x: int, y: int) -> bool:
            if self.power_down or self.display_mode == "blank":
                return False
            if self.display_mode == "all_on":
                return True
            value = self.pixel(x, y)
            return not value if self.display_mode == "inverse" else value

        return "\n".join(
            "".join("#" if shown(x, y) else "." for x in range(MAX_X))
            for y in range(MAX_Y)
        )