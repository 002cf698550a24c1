import pytest

from goo.reporter import Reporter


def test_fresh_reporter_has_nothing():
    reporter = Reporter()
    assert reporter.has_error() is False
    assert reporter.has_warnings() is False


def test_plain_error_format():
    reporter = Reporter("prog.bf")
    reporter.error("boom")
    assert reporter.errors == ["prog.bf: Error: boom"]
    assert reporter.has_error() is True


def test_plain_warning_format_without_filename():
    reporter = Reporter()
    reporter.warning("careful")
    assert reporter.warnings == [": Warning: careful"]
    assert reporter.has_warnings() is True
    assert reporter.has_error() is False


def test_located_error_shows_source_line_and_caret():
    reporter = Reporter("prog.bf")
    reporter.set_code("+++\n>>[<\n")
    reporter.error("unmatched", 2, 3)
    assert reporter.errors == [
        "prog.bf: 2:3: Error: unmatched",
        "\t2\t|\t\t>>[<",
        "\t\t|\t\t  ^",
    ]


def test_located_warning_has_three_lines():
    reporter = Reporter()
    reporter.set_code("><")
    reporter.warning("wrap", 1, 2)
    assert len(reporter.warnings) == 3
    assert reporter.warnings[0] == ": 1:2: Warning: wrap"
    assert reporter.warnings[1] == "\t1\t|\t\t><"


@pytest.mark.parametrize("line", [0, 3])
def test_located_message_outside_code_raises(line):
    reporter = Reporter()
    reporter.set_code("+\n-")
    with pytest.raises(IndexError):
        reporter.error("bad", line, 1)


def test_print_writes_errors_before_warnings(capsys):
    reporter = Reporter("f")
    reporter.warning("w")
    reporter.error("e")
    reporter.print()
    assert capsys.readouterr().out == "f: Error: e\nf: Warning: w\n"


def test_print_does_not_clear(capsys):
    reporter = Reporter()
    reporter.error("e")
    reporter.print()
    capsys.readouterr()
    assert reporter.has_error() is True


def test_reset_clears_everything():
    reporter = Reporter()
    reporter.error("e")
    reporter.warning("w")
    reporter.reset()
    assert reporter.errors == []
    assert reporter.warnings == []
    assert reporter.has_error() is False