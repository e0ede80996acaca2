"""Textual LLVM IR generation from a checked AST."""

from __future__ import annotations

import logging
import os

from dslc.symbol_table import SymbolTable
from dslc.syntax import Assign, BinaryOp, BinOp, Node, Number, Print, Program, Var

logger = logging.getLogger(__name__)

_HEADER = (
    "; ============================================================\n"
    "; LLVM IR generated by DSL Compiler\n"
    "; ============================================================\n\n"
    'source_filename = "dsl_program"\n'
    'target datalayout = "e-m:e-p270:32:32-p271:32:32-p272:64:64-i64:64'
    '-f80:128-n8:16:32:64-S128"\n\n'
    "; External printf declaration\n"
    "declare i32 @printf(i8* nocapture readonly, ...)\n\n"
    "; Format string for print\n"
    '@fmt = private unnamed_addr constant [4 x i8] c"%d\\0A\\00", align 1\n\n'
)

_OPCODES = {
    BinOp.ADD: "add",
    BinOp.SUB: "sub",
    BinOp.MUL: "mul",
    BinOp.DIV: "sdiv",
}


class CodegenError(Exception):
    """Raised when the AST holds a node that cannot be compiled."""


class CodeGenerator:
    """Emits an ``@main`` function with one stack slot per symbol-table variable."""

    def __init__(self, table: SymbolTable) -> None:
        self.table = table
        self._lines: list[str] = []
        self._counter = 0

    def _next_tmp(self) -> int:
        tmp = self._counter
        self._counter += 1
        return tmp

    def _emit(self, text: str) -> None:
        self._lines.append(text)

    def _expr(self, node: Node) -> int:
        if isinstance(node, Number):
            t = self._next_tmp()
            self._emit(f"  %t{t} = add i32 0, {node.value}\n")
            return t
        if isinstance(node, Var):
            t = self._next_tmp()
            self._emit(f"  %t{t} = load i32, i32* %{node.name}, align 4\n")
            return t
        if isinstance(node, BinaryOp):
            left = self._expr(node.left)
            right = self._expr(node.right)
            t = self._next_tmp()
            self._emit(f"  %t{t} = {_OPCODES[node.op]} i32 %t{left}, %t{right}\n")
            return t
        raise CodegenError(f"Unexpected expression node: {type(node).__name__}")

    def _stmt(self, node: Node) -> None:
        if isinstance(node, Assign):
            self._emit(f"  ; assign {node.var_name}\n")
            rhs = self._expr(node.expr)
            self._emit(f"  store i32 %t{rhs}, i32* %{node.var_name}, align 4\n")
        elif isinstance(node, Print):
            self._emit("  ; print\n")
            value = self._expr(node.expr)
            fmt = self._next_tmp()
            self._emit(
                f"  %t{fmt} = getelementptr inbounds [4 x i8], [4 x i8]* @fmt, i32 0, i32 0\n"
            )
            result = self._next_tmp()
            self._emit(
                f"  %t{result} = call i32 (i8*, ...) @printf(i8* %t{fmt}, i32 %t{value})\n"
            )
        else:
            logger.warning("Unexpected statement node: %s", type(node).__name__)

    def generate(self, root: Node | None) -> str:
        """Return the complete IR module for ``root``."""
        self._lines = [_HEADER, "define i32 @main() {\n", "entry:\n"]
        self._counter = 0

        self._emit("  ; --- Variable allocations ---\n")
        for entry in self.table:
            self._emit(f"  %{entry.name} = alloca i32, align 4\n")
        self._emit("\n")

        if isinstance(root, Program):
            for stmt in root.statements:
                self._stmt(stmt)

        self._emit("\n  ; --- Program exit ---\n")
        self._emit("  ret i32 0\n")
        self._emit("}\n")
        return "".join(self._lines)


def generate_ir(root: Node | None, table: SymbolTable) -> str:
    """Return the IR module for ``root`` using the variables in ``table``."""
    return CodeGenerator(table).generate(root)


def write_ir(root: Node | None, table: SymbolTable, path: str | os.PathLike[str]) -> None:
    """Generate IR for ``root`` and write it to ``path``."""
    with open(path, "w", encoding="utf-8") as out:
        out.write(generate_ir(root, table))