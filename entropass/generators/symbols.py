#!/usr/bin/env python3
"""
Symbol Catalogue
================
Immutable, deduplicated set of candidate symbols for secret generation.

A symbol is a single character (chars mode) or a whole word (word-list
modes). Symbols are kept in sorted order so that a catalogue built from
the same input always looks the same; the order plays no part in random
selection.

Usage:
    from entropass.generators.symbols import SymbolSet

    chars = SymbolSet.from_chars("abcdef0123")
    words = SymbolSet.from_file("words.txt")

    chars.base_entropy(12)   # 12 * log2(16)
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from entropass.errors import EmptySymbolSet


class SymbolSet:
    """
    Catalogue of distinct, non-empty symbols.

    Construction drops duplicates and the empty string, and raises
    EmptySymbolSet when nothing is left.
    """

    __slots__ = ('_symbols', '_byte_lengths')

    def __init__(self, symbols: Iterable[str]):
        unique = set(symbols)
        unique.discard('')
        if not unique:
            raise EmptySymbolSet()
        self._symbols: Tuple[str, ...] = tuple(sorted(unique))
        self._byte_lengths: Tuple[int, ...] = tuple(
            len(s.encode('utf-8')) for s in self._symbols
        )

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_chars(cls, chars: Iterable[str]) -> SymbolSet:
        """Build a catalogue with one symbol per character."""
        return cls(c for c in ''.join(chars))

    @classmethod
    def from_lines(cls, lines: Iterable[Union[str, bytes]]) -> SymbolSet:
        """
        Build a catalogue with one symbol per line.

        Lines may be str or bytes (decoded as UTF-8). Line terminators are
        stripped; blank lines are dropped. Errors raised while iterating
        (e.g. OSError from a file object) propagate unchanged.
        """
        def _clean():
            for line in lines:
                if isinstance(line, bytes):
                    line = line.decode('utf-8')
                yield line.rstrip('\r\n')

        return cls(_clean())

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> SymbolSet:
        """Build a catalogue from a newline-delimited UTF-8 word list."""
        with open(path, encoding='utf-8') as f:
            return cls.from_lines(f)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def symbols(self) -> Tuple[str, ...]:
        """Symbols in canonical (sorted) order."""
        return self._symbols

    @property
    def byte_lengths(self) -> Tuple[int, ...]:
        """UTF-8 length of each symbol, aligned with `symbols`."""
        return self._byte_lengths

    @property
    def max_symbol_bytes(self) -> int:
        return max(self._byte_lengths)

    @property
    def min_symbol_bytes(self) -> int:
        return min(self._byte_lengths)

    def base_entropy(self, n: int) -> float:
        """Entropy in bits of n unconstrained uniform draws: n * log2(size)."""
        if not self._symbols or n <= 0:
            return 0.0
        return n * math.log2(len(self._symbols))

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, item) -> bool:
        return item in self._symbols

    def __eq__(self, other) -> bool:
        if not isinstance(other, SymbolSet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        preview = ', '.join(repr(s) for s in self._symbols[:5])
        more = ', ...' if len(self._symbols) > 5 else ''
        return f"SymbolSet([{preview}{more}], size={len(self._symbols)})"


__all__ = ['SymbolSet']
