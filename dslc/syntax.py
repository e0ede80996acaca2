"""Abstract syntax tree for the DSL and a debug printer for it."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, TextIO, Union


class BinOp(Enum):
    """Binary arithmetic operators, valued by their source symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        return self.value


@dataclass
class Number:
    """Integer literal."""

    value: int


@dataclass
class Var:
    """Reference to a variable."""

    name: str


@dataclass
class BinaryOp:
    """Binary operation ``left op right``."""

    op: BinOp
    left: "Expr"
    right: "Expr"


@dataclass
class Assign:
    """Assignment statement ``var_name = expr``."""

    var_name: str
    expr: "Expr"


@dataclass
class Print:
    """Print statement ``print expr``."""

    expr: "Expr"


@dataclass
class Program:
    """Root node holding the program's statements in order."""

    statements: list["Statement"] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.statements = list(self.statements)


Expr = Union[Number, Var, BinaryOp]
Statement = Union[Assign, Print]
Node = Union[Program, Assign, Print, BinaryOp, Number, Var]


def _lines(node: Node | None, indent: int) -> Iterator[str]:
    if node is None:
        return
    pad = "  " * indent
    if isinstance(node, Program):
        yield f"{pad}[Program] ({len(node.statements)} statements)"
        for stmt in node.statements:
            yield from _lines(stmt, indent + 1)
    elif isinstance(node, Assign):
        yield f"{pad}[Assign] {node.var_name} ="
        yield from _lines(node.expr, indent + 1)
    elif isinstance(node, Print):
        yield f"{pad}[Print]"
        yield from _lines(node.expr, indent + 1)
    elif isinstance(node, BinaryOp):
        yield f"{pad}[BinOp] {node.op.symbol}"
        yield from _lines(node.left, indent + 1)
        yield from _lines(node.right, indent + 1)
    elif isinstance(node, Number):
        yield f"{pad}[Number] {node.value}"
    elif isinstance(node, Var):
        yield f"{pad}[Var] {node.name}"
    else:
        raise TypeError(f"not an AST node: {node!r}")


def format_ast(node: Node | None, indent: int = 0) -> str:
    """Render ``node`` as an indented tree, one line per node."""
    return "".join(line + "\n" for line in _lines(node, indent))


def print_ast(node: Node | None, indent: int = 0, file: TextIO | None = None) -> None:
    """Write the indented tree view of ``node`` to ``file`` (stdout by default)."""
    out = sys.stdout if file is None else file
    out.write(format_ast(node, indent))