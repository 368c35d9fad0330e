#!/usr/bin/env python3
"""
Validation Predicates
=====================
Acceptance tests applied to a candidate secret (the joined output string).

A validator is any callable taking the candidate string and returning a
bool. The strategies below may also answer two optional questions that
let the estimator skip work:

- is_trivial(symbols, n, sep): every sequence of n symbols is accepted.
- min_length(symbols, sep): no sequence shorter than this is ever accepted.

Plain functions and lambdas work too; they are always sampled.

Usage:
    from entropass.generators.validators import MaxBytes, RequireClasses, AllOf

    check = AllOf(MaxBytes(32), RequireClasses.from_names(['lower', 'digit']))
    check("abc123")   # True
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, Optional, Tuple

from entropass.config import get_charset
from entropass.generators.symbols import SymbolSet


Validator = Callable[[str], bool]


def joined_bytes(lengths: Iterable[int], n: int, sep: str) -> int:
    """UTF-8 length of n symbols of the given byte lengths joined by sep."""
    return sum(lengths) + max(0, n - 1) * len(sep.encode('utf-8'))


def is_trivial(validator: Optional[Validator], symbols: SymbolSet, n: int, sep: str) -> bool:
    """True if the validator accepts every sequence of n symbols."""
    if validator is None:
        return True
    check = getattr(validator, 'is_trivial', None)
    if check is None:
        return False
    return bool(check(symbols, n, sep))


def min_length(validator: Optional[Validator], symbols: SymbolSet, sep: str = "") -> int:
    """Shortest length at which the validator can accept anything (at least 1)."""
    bound = getattr(validator, 'min_length', None)
    if validator is None or bound is None:
        return 1
    return max(1, int(bound(symbols, sep)))


# =============================================================================
# Strategies
# =============================================================================

class AcceptAll:
    """Accepts every candidate."""

    def __call__(self, candidate: str) -> bool:
        return True

    def is_trivial(self, symbols: SymbolSet, n: int, sep: str) -> bool:
        return True

    def __repr__(self) -> str:
        return "AcceptAll()"


accept_all = AcceptAll()


@dataclass(frozen=True)
class MaxBytes:
    """Accepts candidates whose UTF-8 encoding is at most `limit` bytes."""
    limit: int

    def __post_init__(self):
        if self.limit < 0:
            raise ValueError(f"Byte limit must be non-negative, got {self.limit}")

    def __call__(self, candidate: str) -> bool:
        return len(candidate.encode('utf-8')) <= self.limit

    def is_trivial(self, symbols: SymbolSet, n: int, sep: str) -> bool:
        longest = joined_bytes([symbols.max_symbol_bytes] * n, n, sep)
        return longest <= self.limit


@dataclass(frozen=True)
class RequireClasses:
    """
    Accepts candidates containing at least one character of every class.

    Attributes
    ----------
    classes : tuple of (name, frozenset)
        Named character classes that must all be present.
    """
    classes: Tuple[Tuple[str, FrozenSet[str]], ...]

    @classmethod
    def from_charsets(cls, charsets: Dict[str, str]) -> RequireClasses:
        """Build from a mapping of class name to its characters."""
        classes = tuple(
            (name, frozenset(chars)) for name, chars in charsets.items() if chars
        )
        return cls(classes)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> RequireClasses:
        """Build from registered character class names (see entropass.config)."""
        return cls.from_charsets({name: get_charset([name]) for name in names})

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.classes)

    def __call__(self, candidate: str) -> bool:
        present = set(candidate)
        return all(not present.isdisjoint(chars) for _, chars in self.classes)

    def _covered(self, symbol: str) -> int:
        chars = set(symbol)
        return sum(1 for _, c in self.classes if not chars.isdisjoint(c))

    def is_trivial(self, symbols: SymbolSet, n: int, sep: str) -> bool:
        # Every symbol alone covers all classes
        return all(self._covered(s) == len(self.classes) for s in symbols)

    def min_length(self, symbols: SymbolSet, sep: str = "") -> int:
        # n symbols cover at most n * best classes, plus those in sep once n >= 2
        needed = len(self.classes)
        if not needed:
            return 1
        best = max(self._covered(s) for s in symbols)
        if best >= needed:
            return 1
        from_sep = self._covered(sep) if sep else 0
        if best == 0:
            return 2 if from_sep >= needed else 1
        return max(2, math.ceil((needed - from_sep) / best))


class AllOf:
    """Accepts candidates accepted by every wrapped validator."""

    def __init__(self, *validators: Validator):
        self.validators = tuple(v for v in validators if v is not None)

    def __call__(self, candidate: str) -> bool:
        return all(v(candidate) for v in self.validators)

    def is_trivial(self, symbols: SymbolSet, n: int, sep: str) -> bool:
        return all(is_trivial(v, symbols, n, sep) for v in self.validators)

    def min_length(self, symbols: SymbolSet, sep: str = "") -> int:
        return max((min_length(v, symbols, sep) for v in self.validators), default=1)

    def __repr__(self) -> str:
        inner = ', '.join(repr(v) for v in self.validators)
        return f"AllOf({inner})"


def combine(*validators: Optional[Validator]) -> Validator:
    """Merge validators, dropping None. Returns accept_all when none remain."""
    present = [v for v in validators if v is not None]
    if not present:
        return accept_all
    if len(present) == 1:
        return present[0]
    return AllOf(*present)


__all__ = [
    'Validator',
    'AcceptAll',
    'accept_all',
    'MaxBytes',
    'RequireClasses',
    'AllOf',
    'combine',
    'is_trivial',
    'min_length',
    'joined_bytes',
]
