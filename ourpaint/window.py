"""Window frame geometry: resize edges, cursors and keyboard snapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto

MAXIMIZE = "maximize"
RESTORE = "restore"
MINIMIZE = "minimize"


class Edge(Flag):
    """Window edges grabbed for resizing."""

    LEFT = auto()
    RIGHT = auto()
    TOP = auto()
    BOTTOM = auto()


_HORIZONTAL = Edge.LEFT | Edge.RIGHT
_VERTICAL = Edge.TOP | Edge.BOTTOM


class CursorShape(Enum):
    """Mouse cursor shown over the window frame."""

    ARROW = auto()
    SIZE_ALL = auto()
    SIZE_HOR = auto()
    SIZE_VER = auto()
    SIZE_F_DIAG = auto()
    SIZE_B_DIAG = auto()


class SnapKey(Enum):
    """Arrow key pressed together with Ctrl to snap the window."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


@dataclass(frozen=True)
class Rect:
    """Integer rectangle; ``right`` and ``bottom`` are the last covered pixels."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_edges(cls, left: int, top: int, right: int, bottom: int) -> Rect:
        return cls(left, top, right - left + 1, bottom - top + 1)

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    def translated(self, dx: int, dy: int) -> Rect:
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


def resize_edges(x: int, y: int, width: int, height: int, margin: int = 10) -> Edge:
    """Edges within ``margin`` of the position ``(x, y)`` inside the window."""
    edges = Edge(0)
    if x <= margin:
        edges |= Edge.LEFT
    if x >= width - margin:
        edges |= Edge.RIGHT
    if y <= margin:
        edges |= Edge.TOP
    if y >= height - margin:
        edges |= Edge.BOTTOM
    return edges


def cursor_for_edges(edges: Edge) -> CursorShape:
    """Cursor to show while hovering over the given edges."""
    if edges & _HORIZONTAL and edges & _VERTICAL:
        if Edge.LEFT in edges and Edge.TOP in edges:
            return CursorShape.SIZE_F_DIAG
        if Edge.RIGHT in edges and Edge.BOTTOM in edges:
            return CursorShape.SIZE_F_DIAG
        return CursorShape.SIZE_B_DIAG
    if edges & _HORIZONTAL:
        return CursorShape.SIZE_HOR
    if edges & _VERTICAL:
        return CursorShape.SIZE_VER
    return CursorShape.ARROW


def resize_rect(rect: Rect, edges: Edge, dx: int, dy: int) -> Rect:
    """Move the grabbed edges of ``rect`` by the mouse displacement."""
    left, top, right, bottom = rect.left, rect.top, rect.right, rect.bottom
    if Edge.LEFT in edges:
        left += dx
    if Edge.RIGHT in edges:
        right += dx
    if Edge.TOP in edges:
        top += dy
    if Edge.BOTTOM in edges:
        bottom += dy
    return Rect.from_edges(left, top, right, bottom)


def snap_geometry(
    key: SnapKey, current: Rect, screen: Rect, maximized: bool = False
) -> Rect | str:
    """New geometry for Ctrl+arrow, or MAXIMIZE, RESTORE or MINIMIZE."""
    left, top = screen.left, screen.top
    half_w, half_h = screen.width // 2, screen.height // 2
    full_h = screen.height
    mid = left + half_w

    left_full = Rect(left, top, half_w, full_h)
    right_full = Rect(mid, top, half_w, full_h)
    left_top = Rect(left, top, half_w, half_h)
    right_top = Rect(mid, top, half_w, half_h)
    left_bottom = Rect(left, half_h, half_w, half_h)
    right_bottom = Rect(mid, half_h, half_w, half_h)

    if key is SnapKey.LEFT:
        if current == right_top:
            return left_top
        if current == right_bottom:
            return left_bottom
        return left_full
    if key is SnapKey.RIGHT:
        # The upper-left check compares against the lower-left quarter, so a
        # window in the lower-left quarter moves to the upper-right one.
        if current == left_bottom:
            return right_top
        return right_full
    if key is SnapKey.UP:
        if current in (left_full, left_bottom):
            return left_top
        if current in (right_full, right_bottom):
            return right_top
        return MAXIMIZE
    if maximized:
        return RESTORE
    if current in (right_full, right_top):
        return right_bottom
    if current in (left_full, left_top):
        return left_bottom
    return MINIMIZE