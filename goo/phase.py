"""Compiler phases and the pipeline that runs them in sequence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from goo.payload import Payload
from goo.reporter import Reporter


class Phase(ABC):
    """One step of compilation, turning one payload into the next."""

    def __init__(self, reporter: Reporter) -> None:
        self.reporter = reporter

    @abstractmethod
    def run(self, payload: Payload | None) -> Payload | None:
        """Process the payload and return the payload for the next phase."""


class Pipeline:
    """Runs phases one after another, passing each result on.

    After every phase, collected warnings and errors are printed; an error
    stops the pipeline.
    """

    def __init__(self, phases: Iterable[Phase], reporter: Reporter) -> None:
        self._phases = list(phases)
        self._reporter = reporter

    def execute(self, initial_payload: Payload | None) -> bool:
        """Run every phase; return True if no error was reported."""
        if initial_payload is None:
            self._reporter.error(
                "Internal Error: Pipeline.execute invoked without any initial payload."
            )
            return False

        payload: Payload | None = initial_payload
        for phase in self._phases:
            payload = phase.run(payload)

            if self._reporter.has_warnings() or self._reporter.has_error():
                self._reporter.print()
                if self._reporter.has_error():
                    return False

        return True