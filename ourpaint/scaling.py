"""View scaling: window scale, zoom and panning offsets."""

from __future__ import annotations

import math
from collections.abc import Sequence

_ZOOM_STEP = 1.1
_FIT_MARGIN = 1.1


def _ratio(numerator: float, denominator: float) -> float:
    """Floating division that yields inf or nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _first_min(a: float, b: float) -> float:
    """Minimum that keeps the first argument unless the second is smaller."""
    return b if b < a else a


class Scaling:
    """Maps logical coordinates to widget coordinates and back."""

    def __init__(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self.scale = 1.0
        self.zoom = 1.0
        self.users_resize = False
        self.delta_x = 0
        self.delta_y = 0
        self.right_mouse_pressed = False
        self._last_mouse_pos: tuple[int, int] = (0, 0)

    def scale_coordinate(self, x: float) -> float:
        return x * self.scale * self.zoom

    def scale_coordinate_x(self, x: float) -> float:
        return x * self.scale * self.zoom + self.delta_x

    def scale_coordinate_y(self, y: float) -> float:
        return y * self.scale * self.zoom + self.delta_y

    def logic(self, x: float) -> float:
        return x / (self.scale * self.zoom)

    def logic_x(self, x: float) -> float:
        return (x - self.delta_x) / (self.scale * self.zoom)

    def logic_y(self, y: float) -> float:
        return (y + self.delta_y) / (self.scale * self.zoom)

    def fit(self, widget_width: int, widget_height: int, bounds: Sequence[float]) -> None:
        """Update the scale for a widget size and shrink zoom to fit bounds.

        ``bounds`` is ``(max_x, min_x, max_y, min_y)`` or empty.
        """
        self.scale = min(widget_width / self.width, widget_height / self.height)
        if self.users_resize or not bounds:
            return
        factor = self.scale * self.zoom
        if factor == 0:
            return
        half_width = int(widget_width / (2 * factor))
        half_height = int(widget_height / (2 * factor))
        max_x, min_x, max_y, min_y = (float(v) for v in bounds[:4])

        zoom_max_x = abs(_ratio(half_width, max_x / factor))
        zoom_min_x = abs(_ratio(half_width, min_x / factor))
        zoom_max_y = abs(_ratio(half_height, max_y / factor))
        zoom_min_y = abs(_ratio(half_height, min_y / factor))

        new_zoom = _first_min(
            _first_min(zoom_max_x, zoom_min_x),
            _first_min(zoom_max_y, zoom_min_y),
        )
        if new_zoom < self.zoom:
            self.zoom = new_zoom / _FIT_MARGIN

    def zoom_in(self, max_zoom: float) -> None:
        self.users_resize = True
        self.zoom *= _ZOOM_STEP
        if self.zoom > max_zoom:
            self.zoom = max_zoom

    def zoom_out(self) -> None:
        self.users_resize = True
        self.zoom /= _ZOOM_STEP

    def reset_zoom(self) -> None:
        self.users_resize = True
        self.zoom = 1.0
        self.delta_x = 0
        self.delta_y = 0

    def shift(self, dx: int, dy: int) -> None:
        self.delta_x += int(dx)
        self.delta_y += int(dy)

    def start_mouse_press(self, pos: tuple[int, int]) -> None:
        self.right_mouse_pressed = True
        self._last_mouse_pos = (int(pos[0]), int(pos[1]))

    def mouse_move(self, pos: tuple[int, int]) -> None:
        if not self.right_mouse_pressed:
            return
        self.users_resize = True
        x, y = int(pos[0]), int(pos[1])
        last_x, last_y = self._last_mouse_pos
        self.shift(x - last_x, y - last_y)
        self._last_mouse_pos = (x, y)

    def end_mouse_press(self) -> None:
        self.right_mouse_pressed = False

    def reset_users_resize(self) -> None:
        self.users_resize = False