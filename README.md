# dslc

`dslc` turns programs in a tiny integer language into textual LLVM IR.
A program is built as a syntax tree in Python, checked, and then
compiled into a `.ll` module.

The language has two kinds of statement:

- an assignment, `name = expression`
- a print statement, `print expression`

Expressions are integer literals, variable references and the binary
operators `+`, `-`, `*` and `/`.

## Modules

### `dslc.syntax`

The syntax tree is made of dataclasses:

- `Number(value)` is an integer literal.
- `Var(name)` is a variable reference.
- `BinaryOp(op, left, right)` is a binary operation. Its `op` is a `BinOp`
  member (`ADD`, `SUB`, `MUL` or `DIV`). Each member's value, also
  available as `.symbol`, is the operator's character.
- `Assign(var_name, expr)` is an assignment.
- `Print(expr)` is a print statement.
- `Program(statements)` is the root. It keeps the statements in order.

`format_ast(node, indent=0)` renders a tree as indented text, one line per
node and two spaces per level. `print_ast(node, indent=0, file=None)`
writes the same text to `file`, or to standard output if no file is given.
Both functions raise `TypeError` when they meet something that is not a
tree node.

### `dslc.symbol_table`

`SymbolTable` records declared variables as `SymbolEntry(name, defined)`
objects. It stores them in 64 chained buckets, and a name's bucket is
chosen by `symbol_hash(name)`, a djb2 hash over the name's UTF-8 bytes.

- `insert(name)` declares a name and returns its entry.
- `lookup(name)` returns the entry, or `None` if the name was never
  declared.
- `in`, `len()` and iteration work on the table. Iteration visits buckets
  in index order, and within a bucket the most recently inserted name
  comes first.
- `dump()` returns a text listing of every entry.

### `dslc.semantic`

`SemanticAnalyzer().analyse(root)` and the shortcut `analyse(root)` run
two passes. The first pass collects every assignment target. The second
checks every variable reference against those targets. A variable therefore
only has to be assigned somewhere in the program, and it may be read
before the statement that assigns it.

On success the analyser returns the `SymbolTable` of assigned variables.
If any reference is undeclared, it raises `SemanticError`. The error's
`undeclared` attribute lists the offending names in program order, and
`error_count` gives how many there are.

### `dslc.codegen`

`CodeGenerator(table).generate(root)` and the shortcut
`generate_ir(root, table)` return the IR module as a string.
`write_ir(root, table, path)` writes that string to a file.

The module declares `printf` and a `"%d\n"` format constant, and defines
`@main`. Inside `@main`:

- Every variable in the table gets an `alloca i32` slot, allocated in
  table iteration order.
- Temporaries are named `%t0`, `%t1`, and so on.
- Division is emitted as `sdiv`.
- Each `print` calls `printf`.
- The function returns 0.

An unexpected expression node raises `CodegenError`. An unexpected
statement node is skipped, and a warning is logged.

## Example

```python
from dslc.syntax import Assign, BinOp, BinaryOp, Number, Print, Program, Var, print_ast
from dslc.semantic import analyse
from dslc.codegen import generate_ir, write_ir

program = Program([
    Assign("x", Number(6)),
    Assign("y", BinaryOp(BinOp.MUL, Var("x"), Number(7))),
    Print(Var("y")),
])

print_ast(program)              # indented tree view on stdout
table = analyse(program)        # raises SemanticError on undeclared names
ir_text = generate_ir(program, table)
write_ir(program, table, "output.ll")
```

## What it does not do

- There is no parser. Programs cannot be read from source text, so every
  tree has to be built from the node classes.
- There is no command-line program. Everything is used from Python.
- The package only produces the `.ll` text. It does not assemble, link or
  run that output; use an LLVM toolchain for those steps.

## Installation

```
pip install .
```

## Tests

```
pip install ".[test]"
pytest
```