from goo.io_phases import FileInput, OutputPhase, StringInput
from goo.payload import FilePayload, StringPayload
from goo.reporter import Reporter


def test_file_input_reads_content(tmp_path):
    content = "++[>+<-]\n.!\n"
    path = tmp_path / "prog.bf"
    path.write_text(content, encoding="utf-8")
    result = FileInput(Reporter()).run(FilePayload(str(path)))
    assert result == StringPayload(content)


def test_file_input_registers_code_for_reports(tmp_path):
    path = tmp_path / "prog.bf"
    path.write_text("+++\n>>.\n", encoding="utf-8")
    reporter = Reporter()
    FileInput(reporter).run(FilePayload(str(path)))
    reporter.error("oops", 2, 1)
    assert reporter.errors[1] == "\t2\t|\t\t>>."


def test_file_input_reports_missing_file(tmp_path):
    reporter = Reporter()
    result = FileInput(reporter).run(FilePayload(str(tmp_path / "missing.bf")))
    assert result.value == ""
    assert reporter.has_error()


def test_string_input_forwards_payload():
    reporter = Reporter()
    payload = StringPayload("+.")
    assert StringInput(reporter).run(payload) is payload
    reporter.warning("w", 1, 2)
    assert reporter.warnings[1] == "\t1\t|\t\t+."


def test_output_phase_prints_value(capsys):
    result = OutputPhase(Reporter()).run(StringPayload("hello"))
    assert result is None
    assert capsys.readouterr().out == "hello\n"