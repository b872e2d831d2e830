"""Frame conversion utilities for presenting a pixel buffer."""

from typing import Tuple

import numpy as np
from PIL import Image

ON_CHARACTER = "＃"
OFF_CHARACTER = "．"


def display_to_text(
    display: np.ndarray,
    on_char: str = ON_CHARACTER,
    off_char: str = OFF_CHARACTER,
) -> str:
    """Convert a boolean display to one text line per pixel row.

    Args:
        display: Boolean array of shape (width, height)
        on_char: Character painted for lit pixels
        off_char: Character painted for dark pixels

    Returns:
        Text frame of `height` lines, each terminated by a newline
    """
    # (width, height) -> (height, width) so rows print top to bottom
    pixels = np.array(display, dtype=np.bool_).T
    characters = np.where(pixels, on_char, off_char)
    return "".join("".join(row) + "\n" for row in characters)


def create_color_scheme(
    scheme: str = "classic",
) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
    """Get predefined color schemes for snapshots.

    Args:
        scheme: Color scheme name ("classic", "amber", "white", "blue")

    Returns:
        Tuple of (on_color, off_color) as RGB tuples
    """
    schemes = {
        "classic": ((0, 255, 0), (0, 0, 0)),  # Green on black
        "amber": ((255, 176, 0), (0, 0, 0)),  # Amber on black
        "white": ((255, 255, 255), (0, 0, 0)),  # White on black
        "blue": ((0, 255, 255), (0, 0, 64)),  # Cyan on dark blue
    }

    if scheme not in schemes:
        raise ValueError(
            f"Unknown color scheme '{scheme}'. Available: {list(schemes.keys())}"
        )

    return schemes[scheme]


def display_to_rgb(
    display: np.ndarray,
    scale: int = 8,
    on_color: Tuple[int, int, int] = (0, 255, 0),
    off_color: Tuple[int, int, int] = (0, 0, 0),
) -> np.ndarray:
    """Convert a boolean display to an RGB array with optional upscaling.

    Args:
        display: Boolean array of shape (width, height)
        scale: Upscaling factor for better visibility (default: 8x)
        on_color: RGB color for "on" pixels (default: green)
        off_color: RGB color for "off" pixels (default: black)

    Returns:
        RGB array of shape (height*scale, width*scale, 3) with uint8 values
    """
    pixels = np.array(display, dtype=np.bool_).T
    height, width = pixels.shape

    rgb_frame = np.zeros((height, width, 3), dtype=np.uint8)
    rgb_frame[pixels] = on_color
    rgb_frame[~pixels] = off_color

    # Nearest neighbour upscaling
    if scale > 1:
        rgb_frame = np.repeat(np.repeat(rgb_frame, scale, axis=0), scale, axis=1)

    return rgb_frame


def save_snapshot(
    display: np.ndarray,
    filename: str,
    scale: int = 8,
    color_scheme: str = "classic",
) -> None:
    """Write the display as a PNG image."""
    on_color, off_color = create_color_scheme(color_scheme)
    frame = display_to_rgb(display, scale, on_color, off_color)
    Image.fromarray(frame).save(filename)
