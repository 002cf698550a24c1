# goo

goo is a set of compiler phases for the brainfuck language. Each phase
takes a payload (`goo.payload.FilePayload`, `StringPayload`,
`TokenPayload` or `StmtPayload`) and returns the payload for the next one.

## Phases

- `goo.io_phases.FileInput` reads a source file and returns its text;
  `StringInput` passes text through unchanged. Both register the code with
  the reporter so that messages can quote the offending line.
- `goo.scanner.Scanner` turns text into `goo.tokens.Token` objects for
  `+ - > < . , [ ] !`, tracking line and column. Every other character is
  a comment. The token list always ends with an `EOF` token.
- `goo.optimizer.Optimizer` runs three passes in order:
  `GroupPass` merges runs of `+`/`-` and of `>`/`<` (runs that cancel out
  are dropped, loop bodies are grouped too), `ResetPass` replaces `[-]`
  with a `Reset` statement (a directly following `+` run becomes the reset
  value), and `TransferPass` replaces copy loops shaped like `[->+<]`,
  `[>+<-]`, `[<+>-]` and `[>-<+>]` with a `Transfer` statement.
- `goo.interpreter.Interpreter` runs statements on a 30,000 byte tape.
  Bytes wrap within 0–255; the tape pointer wraps at both ends and a
  warning is recorded when it does. `,` reads one byte from the optional
  `input_stream` (standard input otherwise; end of input stores 0). `!`
  appends a dump of the pointer and every non-zero cell to the output. The
  tape persists between runs; output is collected per run.
- `goo.codegen.CodeGen` emits 64-bit NASM assembly for Linux through
  `goo.asm_builder.AsmBuilder` and ends the program with an exit syscall.
  With `CodeGenConfig(debug_build=True)` each instruction group is
  commented with its source `line:column`. The builder is not reset between
  runs.
- `goo.assembler.Assembler` writes the assembly to a temporary file and
  runs `nasm -f elf64` (adding `-g -F dwarf` when
  `AssemblerConfig.debug_build` is set) to produce `output_file`
  (default `out.o`). A failing command is reported as an error.
- `goo.ast_printer.AstPrinter` renders statements as text, one line per
  statement, loop bodies indented by tabs.
- `goo.io_phases.OutputPhase` prints a text payload.

`goo.reporter.Reporter` collects errors and warnings, optionally with a
filename prefix; given a line and column it adds the source line and a
caret under the column. `goo.pipeline.PipelineBuilder` chains phases, and
the resulting `goo.phase.Pipeline` prints collected messages after each
phase and stops at the first error, returning `False`.

## Example

```python
from goo.interpreter import Interpreter
from goo.payload import StmtPayload
from goo.reporter import Reporter
from goo.stmt import IncrementByte, Output

reporter = Reporter()
program = [IncrementByte(1, 1, 65), Output(2, 1)]

result = Interpreter(reporter).run(StmtPayload(stmts=program))
print(result.value)  # "A"
```

The same statement list can be given to `Optimizer`, `CodeGen` or
`AstPrinter`.

## What this package does not do

- There is no parser: nothing turns the scanner's tokens into statements,
  so statement lists are built directly from the classes in `goo.stmt`.
  A pipeline can therefore not run from source text all the way to the
  interpreter or the code generator.
- There is no command-line program and no interactive prompt; the phases
  are used from Python code.

## Requirements

Python 3.10 or newer. `Assembler` additionally needs `nasm` on the `PATH`;
interpreting and generating assembly text do not.