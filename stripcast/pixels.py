"""RGB colours and a small in-memory frame buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def __bytes__(self) -> bytes:
        return bytes((self.r, self.g, self.b))


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
YELLOW = Color(255, 255, 0)


class Frame:
    """A width x height RGB image stored row by row, initially black."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("frame dimensions must not be negative")
        self.width = width
        self.height = height
        self._data = bytearray(width * height * 3)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        return (y * self.width + x) * 3

    def get(self, x: int, y: int) -> Color:
        """Return the colour at (x, y)."""
        i = self._offset(x, y)
        return Color(*self._data[i : i + 3])

    def set(self, x: int, y: int, color: Color) -> None:
        """Set the colour at (x, y)."""
        i = self._offset(x, y)
        self._data[i : i + 3] = bytes(color)

    def fill_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        """Fill a rectangle, clipped to the frame."""
        x0, x1 = max(x, 0), min(x + width, self.width)
        y0, y1 = max(y, 0), min(y + height, self.height)
        if x0 >= x1 or y0 >= y1:
            return
        run = bytes(color) * (x1 - x0)
        for row in range(y0, y1):
            start = (row * self.width + x0) * 3
            self._data[start : start + len(run)] = run

    def clear(self, color: Color = BLACK) -> None:
        """Fill the whole frame with one colour."""
        self._data[:] = bytes(color) * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Return the pixels as packed RGB bytes, row by row."""
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return (self.width, self.height, self._data) == (other.width, other.height, other._data)

    def __repr__(self) -> str:
        return f"Frame({self.width}, {self.height})"