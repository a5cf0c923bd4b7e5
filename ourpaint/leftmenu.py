"""Side panel model: the listed figures and requirements with their fields."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

CLEAR = "Clear"

_PARAM_NAMES: dict[int, tuple[str, ...]] = {
    2: ("ID", "X", "Y"),
    3: ("ID", "X", "Y", "R"),
    4: ("ID", "X1", "Y1", "X2", "Y2"),
}

_SEPARATOR = ": "
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|nan)", re.IGNORECASE
)
_UINT_RE = re.compile(r"\+?\d+")
_UINT_LIMIT = 2**64


def _to_float(text: str) -> float | None:
    stripped = text.strip()
    if not _FLOAT_RE.fullmatch(stripped):
        return None
    return float(stripped)


def _to_id(text: str) -> int:
    """Unsigned 64-bit value of ``text``, or 0 when it is not one."""
    stripped = text.strip()
    if not _UINT_RE.fullmatch(stripped):
        return 0
    value = int(stripped)
    return value if value < _UINT_LIMIT else 0


def _split_line(line: str) -> tuple[str, str] | None:
    parts = line.split(_SEPARATOR)
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


@dataclass(frozen=True)
class FigureEntry:
    """A figure as listed: its shown name, id and coordinates."""

    name: str
    id: int
    params: tuple[float, ...] = ()

    @property
    def lines(self) -> list[str]:
        """The field lines shown under the figure."""
        names = _PARAM_NAMES.get(len(self.params), ())
        lines = []
        for label, value in zip(names, (None, *self.params)):
            if value is None:
                lines.append(f"{label}{_SEPARATOR}{self.id}")
            else:
                lines.append(f"{label}{_SEPARATOR}{value:.6f}")
        return lines


@dataclass(frozen=True)
class RequirementEntry:
    """A requirement as listed: its name, id, the two objects and a parameter."""

    name: str
    id: int
    id1: int
    id2: int
    parameter: float = 0.0

    @property
    def lines(self) -> list[str]:
        """The field lines shown under the requirement."""
        return [
            f"ID{_SEPARATOR}{self.id}",
            f"Requirement ID{_SEPARATOR}{self.id1}",
            f"Element ID{_SEPARATOR}{self.id2}",
            f"Parameter{_SEPARATOR}{self.parameter:g}",
        ]


def parse_figure_lines(lines: Iterable[str]) -> tuple[int, list[float]]:
    """Read the id and numeric parameters back from a figure's field lines.

    Lines not of the form ``name: value`` and values that are not numbers
    are skipped; a missing or malformed id gives 0.
    """
    figure_id = 0
    params: list[float] = []
    for line in lines:
        split = _split_line(line)
        if split is None:
            continue
        name, value = split
        if name == "ID":
            figure_id = _to_id(value)
            continue
        number = _to_float(value)
        if number is not None:
            params.append(number)
    return figure_id, params


class LeftMenu:
    """The lists of figures and requirements shown beside the drawing."""

    def __init__(self) -> None:
        self._figures: list[FigureEntry] = []
        self._requirements: list[RequirementEntry] = []

    @property
    def figures(self) -> tuple[FigureEntry, ...]:
        return tuple(self._figures)

    @property
    def requirements(self) -> tuple[RequirementEntry, ...]:
        return tuple(self._requirements)

    def add_figure(
        self, id: int, text: str, params: Sequence[float] = ()
    ) -> FigureEntry | None:
        """List a figure under a name unique among figures.

        A ``text`` of ``"Clear"`` empties the list instead and returns None.
        """
        if text == CLEAR:
            self.clear_figures()
            return None
        taken = {entry.name for entry in self._figures}
        name = text
        count = 1
        while name in taken:
            name = f"{text}{count}"
            count += 1
        entry = FigureEntry(name, int(id), tuple(float(p) for p in params))
        self._figures.append(entry)
        return entry

    def clear_figures(self) -> None:
        self._figures.clear()

    def add_requirement(
        self, id: int, text: str, id1: int, id2: int, parameter: float = 0.0
    ) -> RequirementEntry | None:
        """List a requirement.

        A ``text`` of ``"Clear"`` empties the list instead and returns None.
        """
        if text == CLEAR:
            self.clear_requirements()
            return None
        entry = RequirementEntry(text, int(id), int(id1), int(id2), float(parameter))
        self._requirements.append(entry)
        return entry

    def clear_requirements(self) -> None:
        self._requirements.clear()

    def figure_names(self) -> dict[int, str]:
        """Shown name of each listed figure by id; the first listing wins."""
        names: dict[int, str] = {}
        for entry in self._figures:
            if entry.lines:
                names.setdefault(entry.id, entry.name)
        return names

    def requirement_names(self) -> dict[int, str]:
        """Shown name of each listed requirement by id; the first listing wins."""
        names: dict[int, str] = {}
        for entry in self._requirements:
            names.setdefault(entry.id, entry.name)
        return names