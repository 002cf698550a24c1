from goo.interpreter import Interpreter
from goo.optimizer import GroupPass, Optimizer, ResetPass, TransferPass
from goo.payload import StmtPayload
from goo.reporter import Reporter
from goo.stmt import (
    Conditional,
    DecrementByte,
    DecrementPtr,
    IncrementByte,
    IncrementPtr,
    Output,
    Reset,
    Transfer,
)

_SIMPLE = {
    "+": IncrementByte,
    "-": DecrementByte,
    ">": IncrementPtr,
    "<": DecrementPtr,
    ".": Output,
}


def _parse(source):
    stack = [[]]
    starts = []
    for column, char in enumerate(source, start=1):
        if char == "[":
            starts.append(column)
            stack.append([])
        elif char == "]":
            body = stack.pop()
            stack[-1].append(Conditional(starts.pop(), 1, body))
        else:
            stack[-1].append(_SIMPLE[char](column, 1))
    return stack[0]


def _run(stmts):
    reporter = Reporter()
    return Interpreter(reporter).run(StmtPayload(stmts)).value


def test_group_merges_increments():
    assert GroupPass().run(_parse("+++")) == [IncrementByte(1, 1, 3)]


def test_group_nets_out_mixed_byte_ops():
    assert GroupPass().run(_parse("+++--")) == [IncrementByte(1, 1, 1)]
    assert GroupPass().run(_parse("--+")) == [DecrementByte(1, 1, 1)]


def test_group_pointer_ops():
    assert GroupPass().run(_parse(">><")) == [IncrementPtr(1, 1, 1)]
    assert GroupPass().run(_parse("<<<")) == [DecrementPtr(1, 1, 3)]


def test_group_keeps_categories_apart():
    assert GroupPass().run(_parse("++>")) == [IncrementByte(1, 1, 2), IncrementPtr(3, 1, 1)]


def test_group_drops_cancelling_run():
    assert GroupPass().run(_parse("+-.")) == [Output(3, 1)]


def test_group_recurses_into_loops():
    result = GroupPass().run(_parse("[--]"))
    assert result == [Conditional(1, 1, [DecrementByte(2, 1, 2)])]


def test_reset_plain():
    stmts = GroupPass().run(_parse("[-]"))
    assert ResetPass().run(stmts) == [Reset(1, 1, 0, 0)]


def test_reset_with_initial_value_consumes_increment():
    stmts = GroupPass().run(_parse("[-]+++."))
    assert ResetPass().run(stmts) == [Reset(1, 1, 3, 0), Output(7, 1)]


def test_reset_leaves_other_loops():
    stmts = GroupPass().run(_parse("[+.]"))
    assert ResetPass().run(stmts) == stmts


def test_transfer_dec_first():
    stmts = GroupPass().run(_parse("[->+<]"))
    assert TransferPass().run(stmts) == [Transfer(1, 1, 1, 0)]


def test_transfer_ptr_first():
    stmts = GroupPass().run(_parse("[>+<-]"))
    assert TransferPass().run(stmts) == [Transfer(1, 1, 1, 0)]


def test_transfer_to_the_left():
    stmts = GroupPass().run(_parse("[<+>-]"))
    assert TransferPass().run(stmts) == [Transfer(1, 1, -1, 0)]


def test_transfer_longer_distance():
    stmts = GroupPass().run(_parse("[->>+<<]"))
    assert TransferPass().run(stmts) == [Transfer(1, 1, 2, 0)]


def test_transfer_with_trailing_pointer_move():
    stmts = GroupPass().run(_parse("[>-<+>]"))
    assert TransferPass().run(stmts) == [Transfer(1, 1, 0, 1), IncrementPtr(1, 1, 1)]


def test_transfer_rejects_multiplying_loop():
    stmts = GroupPass().run(_parse("[->++<]"))
    assert TransferPass().run(stmts) == stmts


def test_optimizer_runs_all_passes():
    result = Optimizer(Reporter()).run(StmtPayload(_parse("[-]++[->+<]")))
    assert result.stmts == [Reset(1, 1, 2, 0), Transfer(6, 1, 1, 0)]


def test_optimizer_keeps_program_output():
    program = _parse("++++++++[>++++++++<-]>+.[-]+++.>+++[->+<]>.")
    optimized = Optimizer(Reporter()).run(StmtPayload(program)).stmts
    assert len(optimized) < len(program) or optimized != program
    assert _run(optimized) == _run(program)