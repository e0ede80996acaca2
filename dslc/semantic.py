"""Semantic analysis: every variable that is read must be assigned somewhere."""

from __future__ import annotations

from typing import Iterator

from dslc.symbol_table import SymbolTable
from dslc.syntax import Assign, BinaryOp, Node, Number, Print, Program, Var


class SemanticError(Exception):
    """Raised when a program reads variables that are never assigned."""

    def __init__(self, undeclared: list[str]) -> None:
        self.undeclared = list(undeclared)
        details = "; ".join(f"Undeclared variable: '{name}'" for name in self.undeclared)
        super().__init__(f"{len(self.undeclared)} error(s) found: {details}")

    @property
    def error_count(self) -> int:
        return len(self.undeclared)


class SemanticAnalyzer:
    """Two-pass checker: collect assignment targets, then verify every reference.

    Because all targets are collected first, a variable may be read before
    the statement that assigns it.
    """

    def __init__(self) -> None:
        self.table = SymbolTable()

    def _collect(self, node: Node | None) -> None:
        if isinstance(node, Program):
            for stmt in node.statements:
                self._collect(stmt)
        elif isinstance(node, Assign):
            self.table.insert(node.var_name)

    def _undeclared(self, node: Node | None) -> Iterator[str]:
        if node is None:
            return
        if isinstance(node, Program):
            for stmt in node.statements:
                yield from self._undeclared(stmt)
        elif isinstance(node, (Assign, Print)):
            yield from self._undeclared(node.expr)
        elif isinstance(node, BinaryOp):
            yield from self._undeclared(node.left)
            yield from self._undeclared(node.right)
        elif isinstance(node, Var):
            if node.name not in self.table:
                yield node.name
        elif not isinstance(node, Number):
            raise TypeError(f"not an AST node: {node!r}")

    def analyse(self, root: Node | None) -> SymbolTable:
        """Check ``root`` and return the symbol table of assigned variables.

        Raises SemanticError listing every undeclared reference, in program order.
        """
        self._collect(root)
        undeclared = list(self._undeclared(root))
        if undeclared:
            raise SemanticError(undeclared)
        return self.table


def analyse(root: Node | None) -> SymbolTable:
    """Run semantic analysis on ``root`` with a fresh analyzer."""
    return SemanticAnalyzer().analyse(root)