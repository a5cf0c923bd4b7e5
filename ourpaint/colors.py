"""Frame colour chosen for the best contrast against the background."""

from __future__ import annotations

from collections.abc import Sequence

Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)

_BLACK_LUMINANCE = 0.0
_WHITE_LUMINANCE = 1.0
_FLARE = 0.05


def average_color(rows: Sequence[Sequence[Sequence[int]]]) -> Color | None:
    """Average RGB of a sampled image given as rows of ``(r, g, b)`` pixels.

    Large images are sampled on a grid whose step is a hundredth of the
    shorter side. Returns None for an empty image.
    """
    height = len(rows)
    width = len(rows[0]) if height else 0
    if width * height == 0:
        return None
    if any(len(row) != width for row in rows):
        raise ValueError("image rows differ in length")
    step = max(1, min(width, height) // 100)
    sums = [0, 0, 0]
    for row in rows[::step]:
        for pixel in row[::step]:
            sums[0] += pixel[0]
            sums[1] += pixel[1]
            sums[2] += pixel[2]
    samples = ((width + step - 1) // step) * ((height + step - 1) // step)
    red, green, blue = (total // samples for total in sums)
    return red, green, blue


def relative_luminance(red: int, green: int, blue: int) -> float:
    """Luminance of an 8-bit colour on a 0..1 scale."""
    return (0.2126 * red + 0.7152 * green + 0.0722 * blue) / 255.0


def contrast_color(red: int, green: int, blue: int) -> Color:
    """Black or white, whichever contrasts more with the given colour."""
    luminance = relative_luminance(red, green, blue)
    with_black = (luminance + _FLARE) / (_BLACK_LUMINANCE + _FLARE)
    with_white = (_WHITE_LUMINANCE + _FLARE) / (luminance + _FLARE)
    return BLACK if with_black > with_white else WHITE


def choose_frame_color(rows: Sequence[Sequence[Sequence[int]]]) -> Color:
    """Frame colour for a background image; white when the image is empty."""
    average = average_color(rows)
    if average is None:
        return WHITE
    return contrast_color(*average)