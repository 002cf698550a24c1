import subprocess
from unittest.mock import patch

from goo.assembler import AssemblerConfig
from goo.codegen import CodeGenConfig
from goo.payload import FilePayload, StmtPayload, StringPayload
from goo.pipeline import PipelineBuilder
from goo.reporter import Reporter
from goo.stmt import DecrementPtr, IncrementByte, Output


def test_string_input_to_output(capsys):
    pipeline = PipelineBuilder(Reporter()).string_input().output().build()
    assert pipeline.execute(StringPayload("hello")) is True
    assert capsys.readouterr().out == "hello\n"


def test_file_input_to_output(tmp_path, capsys):
    source = tmp_path / "prog.bf"
    source.write_text("+++.")
    pipeline = PipelineBuilder(Reporter()).file_input().output().build()
    assert pipeline.execute(FilePayload(str(source))) is True
    assert capsys.readouterr().out == "+++.\n"


def test_missing_file_stops_pipeline(tmp_path, capsys):
    pipeline = PipelineBuilder(Reporter()).file_input().output().build()
    assert pipeline.execute(FilePayload(str(tmp_path / "missing.bf"))) is False
    assert "Error: Failed to read file" in capsys.readouterr().out


def test_execute_without_payload_fails():
    reporter = Reporter()
    pipeline = PipelineBuilder(reporter).string_input().build()
    assert pipeline.execute(None) is False
    assert reporter.has_error()


def test_lexer_phase_runs():
    reporter = Reporter()
    pipeline = PipelineBuilder(reporter).string_input().lexer().build()
    assert pipeline.execute(StringPayload("+[-]")) is True
    assert not reporter.has_error()


def test_interpreter_pipeline(capsys):
    stmts = [IncrementByte(1, 1, 72), Output(2, 1)]
    pipeline = PipelineBuilder(Reporter()).interpreter().output().build()
    assert pipeline.execute(StmtPayload(stmts)) is True
    assert capsys.readouterr().out == "H\n"


def test_warnings_are_printed_but_do_not_stop(capsys):
    reporter = Reporter()
    reporter.set_code("<.")
    pipeline = PipelineBuilder(reporter).interpreter().build()
    assert pipeline.execute(StmtPayload([DecrementPtr(1, 1)])) is True
    assert "Warning: Attempted to move the tape pointer below 0" in capsys.readouterr().out


def test_optimizer_and_ast_printer(capsys):
    stmts = [IncrementByte(1, 1), IncrementByte(2, 1)]
    pipeline = PipelineBuilder(Reporter()).optimizer().ast_printer().output().build()
    assert pipeline.execute(StmtPayload(stmts)) is True
    assert capsys.readouterr().out == "<IncrementByte> 1:1\n\n"


def test_code_gen_pipeline(capsys):
    pipeline = (
        PipelineBuilder(Reporter()).optimizer().code_gen(CodeGenConfig()).output().build()
    )
    assert pipeline.execute(StmtPayload([IncrementByte(1, 1)])) is True
    out = capsys.readouterr().out
    assert out.startswith("bits 64\n")
    assert out.endswith("\tsyscall\n")


def test_assembler_pipeline(tmp_path):
    target = str(tmp_path / "out.o")
    with patch(
        "goo.assembler.subprocess.run",
        side_effect=lambda cmd, check=False: subprocess.CompletedProcess(cmd, 0),
    ) as run_mock:
        pipeline = (
            PipelineBuilder(Reporter())
            .string_input()
            .assembler(AssemblerConfig(output_file=target))
            .build()
        )
        assert pipeline.execute(StringPayload("bits 64\n")) is True
    assert run_mock.call_args.args[0][-1] == target


def test_failing_assembler_fails_pipeline():
    with patch(
        "goo.assembler.subprocess.run",
        side_effect=lambda cmd, check=False: subprocess.CompletedProcess(cmd, 1),
    ):
        pipeline = (
            PipelineBuilder(Reporter()).string_input().assembler(AssemblerConfig()).build()
        )
        assert pipeline.execute(StringPayload("bits 64\n")) is False