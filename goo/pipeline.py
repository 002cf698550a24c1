"""Assembles pipelines from the available compiler phases."""

from __future__ import annotations

from goo.asm_builder import AsmBuilder
from goo.assembler import Assembler, AssemblerConfig
from goo.ast_printer import AstPrinter
from goo.codegen import CodeGen, CodeGenConfig
from goo.interpreter import Interpreter
from goo.io_phases import FileInput, OutputPhase, StringInput
from goo.optimizer import Optimizer
from goo.phase import Phase, Pipeline
from goo.reporter import Reporter
from goo.scanner import Scanner


class PipelineBuilder:
    """Collects phases in call order and builds a pipeline from them.

    Each method appends one phase and returns the builder. Call the methods
    in a sensible order: an input phase first.
    """

    def __init__(self, reporter: Reporter) -> None:
        self._reporter = reporter
        self._phases: list[Phase] = []

    def _add(self, phase: Phase) -> PipelineBuilder:
        self._phases.append(phase)
        return self

    def build(self) -> Pipeline:
        return Pipeline(self._phases, self._reporter)

    def file_input(self) -> PipelineBuilder:
        return self._add(FileInput(self._reporter))

    def string_input(self) -> PipelineBuilder:
        return self._add(StringInput(self._reporter))

    def lexer(self) -> PipelineBuilder:
        return self._add(Scanner(self._reporter))

    def optimizer(self) -> PipelineBuilder:
        return self._add(Optimizer(self._reporter))

    def interpreter(self) -> PipelineBuilder:
        return self._add(Interpreter(self._reporter))

    def code_gen(self, config: CodeGenConfig) -> PipelineBuilder:
        return self._add(CodeGen(config, AsmBuilder(), self._reporter))

    def assembler(self, config: AssemblerConfig) -> PipelineBuilder:
        return self._add(Assembler(config, self._reporter))

    def ast_printer(self) -> PipelineBuilder:
        return self._add(AstPrinter(self._reporter))

    def output(self) -> PipelineBuilder:
        return self._add(OutputPhase(self._reporter))