"""Collects errors and warnings to report them to the user."""

from __future__ import annotations

from goo.util import repeat_string, split_into_lines


class Reporter:
    """Tracks errors and warnings, optionally pointing at source locations.

    Errors signal that execution should not continue; warnings signal soft
    issues. ``print`` writes everything out; ``reset`` clears the state.
    """

    def __init__(self, filename: str = "") -> None:
        self._prefix = f"{filename}: "
        self._errors: list[str] = []
        self._warnings: list[str] = []
        self._code_lines: list[str] = []

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    @property
    def warnings(self) -> list[str]:
        return list(self._warnings)

    def set_code(self, code: str) -> None:
        """Set the code that later located messages refer to."""
        self._code_lines = split_into_lines(code)

    def print(self) -> None:
        """Print errors, then warnings, to standard output."""
        for message in (*self._errors, *self._warnings):
            print(message)

    def error(self, message: str, line: int | None = None, column: int | None = None) -> None:
        """Record an error, with a source excerpt if a location is given."""
        self._errors.extend(self._format("Error", message, line, column))

    def warning(self, message: str, line: int | None = None, column: int | None = None) -> None:
        """Record a warning, with a source excerpt if a location is given."""
        self._warnings.extend(self._format("Warning", message, line, column))

    def has_error(self) -> bool:
        return bool(self._errors)

    def has_warnings(self) -> bool:
        return bool(self._warnings)

    def reset(self) -> None:
        """Clear all recorded errors and warnings."""
        self._errors.clear()
        self._warnings.clear()

    def _format(self, kind: str, message: str, line: int | None, column: int | None) -> list[str]:
        if line is None or column is None:
            return [f"{self._prefix}{kind}: {message}"]
        if not 1 <= line <= len(self._code_lines):
            raise IndexError(f"line {line} is outside of the reported code")
        return [
            f"{self._prefix}{line}:{column}: {kind}: {message}",
            f"\t{line}\t|\t\t{self._code_lines[line - 1]}",
            f"\t\t|\t\t{repeat_string(' ', column - 1)}^",
        ]