"""Console helpers: command autocompletion and command history."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_COMMANDS = ("circle ", "exit", "addreq ", "section ", "point ", "clear")


class Autocompleter:
    """Suggests the first known command that starts with the typed text."""

    def __init__(self, commands: Iterable[str] = DEFAULT_COMMANDS) -> None:
        self.commands = list(commands)
        self._current = ""

    @property
    def suggestion(self) -> str | None:
        return self._current or None

    def update(self, text: str) -> str | None:
        """Recompute the suggestion for ``text`` and return it."""
        self._current = ""
        if text:
            lowered = text.casefold()
            self._current = next(
                (cmd for cmd in self.commands if cmd.casefold().startswith(lowered)), ""
            )
        return self.suggestion

    def hint(self, text: str) -> str:
        """The part of the suggestion shown after ``text``."""
        return self._current[len(text):]

    def accept(self) -> str | None:
        """Take the suggestion, as Tab does, and clear it."""
        accepted = self.suggestion
        self._current = ""
        return accepted


class CommandHistory:
    """Entered console commands, navigated with the arrow keys."""

    def __init__(self, commands: Iterable[str] = ()) -> None:
        self._commands = [cmd for cmd in commands if cmd]
        self._index = 0

    @property
    def commands(self) -> tuple[str, ...]:
        return tuple(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def add(self, command: str) -> None:
        if command:
            self._commands.append(command)

    def previous(self) -> str | None:
        """Step as the Up key does; None when the history is empty."""
        if not self._commands:
            return None
        if self._index == 0:
            self._index = len(self._commands) - 1
        else:
            self._index = (self._index + 1) % len(self._commands)
        return self._commands[self._index]

    def next(self) -> str | None:
        """Step as the Down key does; None when the history is empty."""
        if not self._commands:
            return None
        self._index = (self._index - 1) % len(self._commands)
        return self._commands[self._index]