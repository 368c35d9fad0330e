#!/usr/bin/env python3
"""
Error Types
===========
Exceptions raised by the symbol and entropy engine.

File read errors from word lists are not wrapped; the OSError raised by
the underlying file object reaches the caller unchanged.
"""


class EntropassError(Exception):
    """Base class for all entropass errors."""


class EmptySymbolSet(EntropassError, ValueError):
    """No usable symbols remain after deduplication."""

    def __init__(self, msg: str = "No usable symbols."):
        super().__init__(msg)


class RngInitError(EntropassError, RuntimeError):
    """The OS entropy source could not be read."""


class ImpossibleConstraint(EntropassError):
    """The acceptance predicate can (practically) never be satisfied."""


class EntropyRequirementNotMet(EntropassError):
    """An explicit length is too short for an explicit entropy target."""

    def __init__(self, required: float, estimate: float):
        self.required = required
        self.estimate = estimate
        super().__init__(
            f"Required entropy is {required:g}, but only {estimate:.2f}"
        )


__all__ = [
    'EntropassError',
    'EmptySymbolSet',
    'RngInitError',
    'ImpossibleConstraint',
    'EntropyRequirementNotMet',
]
