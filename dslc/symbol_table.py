"""Hash-bucketed symbol table of declared integer variables."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Iterator

SYM_TABLE_SIZE = 64

_DJB2_SEED = 5381
_MASK32 = 0xFFFFFFFF


def symbol_hash(name: str) -> int:
    """Return the bucket index of ``name`` (djb2 over its bytes)."""
    h = _DJB2_SEED
    for byte in name.encode("utf-8"):
        h = ((h << 5) + h + byte) & _MASK32
    return h % SYM_TABLE_SIZE


@dataclass
class SymbolEntry:
    """A declared variable."""

    name: str
    defined: bool = True


class SymbolTable:
    """Symbol table with chained buckets.

    Iteration visits buckets in index order and, within a bucket,
    the most recently inserted name first.
    """

    def __init__(self) -> None:
        self._buckets: list[list[SymbolEntry]] = [[] for _ in range(SYM_TABLE_SIZE)]

    def _find(self, bucket: list[SymbolEntry], name: str) -> SymbolEntry | None:
        return next((entry for entry in bucket if entry.name == name), None)

    def insert(self, name: str) -> SymbolEntry:
        """Declare ``name``, marking it defined; return its entry."""
        bucket = self._buckets[symbol_hash(name)]
        entry = self._find(bucket, name)
        if entry is None:
            entry = SymbolEntry(name)
            bucket.insert(0, entry)
        else:
            entry.defined = True
        return entry

    def lookup(self, name: str) -> SymbolEntry | None:
        """Return the entry for ``name``, or None if it was never declared."""
        return self._find(self._buckets[symbol_hash(name)], name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[SymbolEntry]:
        return chain.from_iterable(self._buckets)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def dump(self) -> str:
        """Return a listing of every symbol, in iteration order."""
        lines = ["[SymTable] Contents:"]
        lines.extend(f"  {e.name} (defined={int(e.defined)})" for e in self)
        return "\n".join(lines) + "\n"