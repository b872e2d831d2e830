"""Display capability and pixel buffer implementations."""

import abc
import sys
from typing import TextIO

import numpy as np

from termchip.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from termchip.errors import DimensionError
from termchip.rendering import display_to_text


class Display(abc.ABC):
    """Monochrome pixel grid consumed by the interpreter.

    Direct access through `set` and `read` is strict: coordinates must lie in
    [0, width) x [0, height). `toggle`, used by the draw instruction, accepts
    coordinates at most one full dimension out of range and wraps them once.
    """

    @abc.abstractmethod
    def init(self, width: int, height: int) -> None:
        """Allocate a blank grid of the given size."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Turn every pixel off."""

    @abc.abstractmethod
    def set(self, x: int, y: int, value: bool) -> None:
        """Set pixel (x, y), strict bounds."""

    @abc.abstractmethod
    def read(self, x: int, y: int) -> bool:
        """Read pixel (x, y), strict bounds."""

    @abc.abstractmethod
    def toggle(self, x: int, y: int) -> bool:
        """Flip pixel (x, y) with single-wrap bounds. Returns True if the pixel was erased."""

    @abc.abstractmethod
    def render(self) -> None:
        """Flush the grid to the presentation layer."""


class PixelBuffer(Display):
    """Display backed by a boolean array of shape (width, height), updated in place.

    `render` does nothing here; subclasses present the grid.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        self.width = 0
        self.height = 0
        self.grid = np.zeros((0, 0), dtype=np.bool_)
        self.init(width, height)

    def init(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise DimensionError(
                "size",
                f"expected width and height to be strictly positive, "
                f"but received {width} x {height} dimensions",
            )
        self.width = width
        self.height = height
        self.grid = np.zeros((width, height), dtype=np.bool_)

    def check_dimensions(self, x: int, y: int) -> tuple[int, int]:
        """Wrap coordinates by at most one dimension, then check them strictly."""
        new_x, new_y = int(x), int(y)
        if new_x >= self.width:
            new_x -= self.width
        elif new_x < 0:
            new_x += self.width

        if new_y >= self.height:
            new_y -= self.height
        elif new_y < 0:
            new_y += self.height

        if not 0 <= new_x < self.width:
            raise DimensionError(
                "x", f"expected x to be between {-self.width} and {2 * self.width}, but received {x}"
            )
        if not 0 <= new_y < self.height:
            raise DimensionError(
                "y", f"expected y to be between {-self.height} and {2 * self.height}, but received {y}"
            )
        return new_x, new_y

    def check_dimensions_strict(self, x: int, y: int) -> None:
        x, y = int(x), int(y)
        if not 0 <= x < self.width:
            raise DimensionError("x", f"expected x to be between 0 and {self.width}, but received {x}")
        if not 0 <= y < self.height:
            raise DimensionError("y", f"expected y to be between 0 and {self.height}, but received {y}")

    def clear(self) -> None:
        self.grid[:] = False

    def set(self, x: int, y: int, value: bool) -> None:
        self.check_dimensions_strict(x, y)
        self.grid[int(x), int(y)] = bool(value)

    def read(self, x: int, y: int) -> bool:
        self.check_dimensions_strict(x, y)
        return bool(self.grid[int(x), int(y)])

    def toggle(self, x: int, y: int) -> bool:
        x, y = self.check_dimensions(x, y)
        erased = bool(self.grid[x, y])
        self.grid[x, y] = not erased
        return erased

    def render(self) -> None:
        pass


class TerminalDisplay(PixelBuffer):
    """Pixel buffer that repaints the whole terminal on every render."""

    CLEAR_SCREEN = "\033[H\033[2J"

    def __init__(
        self,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        stream: TextIO = None,
    ):
        super().__init__(width, height)
        self.stream = stream or sys.stdout

    def render(self) -> None:
        self.stream.write(self.CLEAR_SCREEN + display_to_text(self.grid))
        self.stream.flush()
