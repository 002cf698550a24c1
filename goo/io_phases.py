"""Phases that bring code into the pipeline and print results out of it."""

from __future__ import annotations

from goo.payload import FilePayload, StringPayload
from goo.phase import Phase


class FileInput(Phase):
    """Reads a source file and hands its content on as text."""

    def run(self, payload: FilePayload) -> StringPayload:
        try:
            with open(payload.filepath, encoding="utf-8", errors="replace", newline="") as handle:
                content = handle.read()
        except OSError as exc:
            self.reporter.error(f"Failed to read file {payload.filepath}: {exc.strerror or exc}")
            content = ""

        self.reporter.set_code(content)
        return StringPayload(content)


class StringInput(Phase):
    """Hands a piece of code on unchanged, registering it for reports."""

    def run(self, payload: StringPayload) -> StringPayload:
        self.reporter.set_code(payload.value)
        return payload


class OutputPhase(Phase):
    """Prints a text payload to standard output; ends the pipeline's data flow."""

    def run(self, payload: StringPayload) -> None:
        print(payload.value)
        return None