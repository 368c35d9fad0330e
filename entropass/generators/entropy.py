#!/usr/bin/env python3
"""
Entropy Estimation
==================
Estimates how many bits of entropy a generated secret really carries.

Without constraints a sequence of n symbols from a catalogue of size k
carries n * log2(k) bits. Rejection sampling against a validator shrinks
the space an attacker has to search to the accepted region, so the
estimator measures the acceptance rate p by Monte Carlo sampling and
reports

    base + log2(p) - log2(safety_margin)

The safety margin biases the estimate downward to absorb sampling noise.
A result of 0.0 means no sample was accepted: treat the constraint as
practically impossible at that length (not as a proof).

Usage:
    from entropass.generators.entropy import estimate_entropy, find_min_length

    bits = estimate_entropy(symbols, 6, " ", MaxBytes(30))
    length, bits = find_min_length(symbols, 64.0, " ", MaxBytes(40))
"""

import logging
import math
from typing import Optional, Tuple

from entropass.errors import ImpossibleConstraint
from entropass.generators.random_sources import SamplingRandom
from entropass.generators.sequence import _check_length, _draw
from entropass.generators.symbols import SymbolSet
from entropass.generators.validators import Validator, is_trivial, min_length
from entropass.settings import get_setting

logger = logging.getLogger(__name__)


DEFAULT_SAMPLES = 100_000
DEFAULT_SAFETY_MARGIN = 1.05
DEFAULT_MAX_SEARCH_LENGTH = 4096


def _resolve_samples(samples: Optional[int]) -> int:
    if samples is None:
        samples = get_setting("entropy.samples", DEFAULT_SAMPLES)
    samples = int(samples)
    if samples < 1:
        raise ValueError(f"Sample count must be positive, got {samples}")
    return samples


def _resolve_margin(safety_margin: Optional[float]) -> float:
    if safety_margin is None:
        safety_margin = get_setting("entropy.safety_margin", DEFAULT_SAFETY_MARGIN)
    safety_margin = float(safety_margin)
    if safety_margin < 1.0:
        raise ValueError(f"Safety margin must be at least 1.0, got {safety_margin}")
    return safety_margin


def acceptance_rate(symbols: SymbolSet,
                    n: int,
                    sep: str,
                    validator: Validator,
                    samples: int,
                    rng: SamplingRandom) -> float:
    """Fraction of `samples` random sequences accepted by the validator."""
    success = 0
    for _ in range(samples):
        if validator(_draw(symbols, n, sep, rng)):
            success += 1
    return success / samples


def estimate_entropy(symbols: SymbolSet,
                     n: int,
                     sep: str = "",
                     validator: Optional[Validator] = None,
                     samples: Optional[int] = None,
                     safety_margin: Optional[float] = None,
                     rng: Optional[SamplingRandom] = None) -> float:
    """
    Estimate the entropy in bits of a validated sequence of n symbols.

    Parameters
    ----------
    symbols : SymbolSet
        Catalogue the sequence is drawn from
    n : int
        Number of symbols
    sep : str
        Separator between symbols
    validator : callable, optional
        Acceptance predicate. None means unconstrained.
    samples : int, optional
        Monte Carlo draws (default: entropy.samples setting, 100000)
    safety_margin : float, optional
        Deflator >= 1.0 (default: entropy.safety_margin setting, 1.05)
    rng : SamplingRandom, optional
        Sampling source, for reproducible tests. A fresh OS-seeded one is
        used when omitted.

    Returns
    -------
    float
        Estimated bits, or 0.0 if the constraint was never met
    """
    _check_length(n)

    base = symbols.base_entropy(n)
    if base == 0.0:
        return 0.0

    if is_trivial(validator, symbols, n, sep):
        logger.debug(f"n={n}: constraint cannot bite, {base:.2f} bits")
        return base

    if rng is None:
        rng = SamplingRandom()
    elif not isinstance(rng, SamplingRandom):
        raise TypeError(f"rng must be a SamplingRandom, got {type(rng).__name__}")

    samples = _resolve_samples(samples)
    margin = _resolve_margin(safety_margin)

    rate = acceptance_rate(symbols, n, sep, validator, samples, rng)
    logger.debug(f"n={n}: {rate * samples:.0f}/{samples} samples accepted")

    if rate == 0.0:
        return 0.0

    return max(0.0, base + math.log2(rate) - math.log2(margin))


def find_min_length(symbols: SymbolSet,
                    target: float,
                    sep: str = "",
                    validator: Optional[Validator] = None,
                    max_length: Optional[int] = None,
                    **estimate_kwargs) -> Tuple[int, float]:
    """
    Find the shortest length whose estimated entropy meets `target` bits.

    The search starts at ceil(target / bits_per_symbol), raised to the
    validator's minimum length if it reports one, and grows by one.

    Returns
    -------
    tuple
        (length, estimated bits)

    Raises
    ------
    ImpossibleConstraint
        If the estimate drops to 0.0 (the requirement can never be met)
        or no length up to max_length is enough
    ValueError
        If target is infinite or NaN
    """
    if not math.isfinite(target):
        raise ValueError(f"Entropy target must be a finite number, got {target}")

    per_symbol = symbols.base_entropy(1)
    if per_symbol == 0.0:
        raise ImpossibleConstraint(
            "Entropy requirement can never be met: a single symbol carries no entropy."
        )

    if max_length is None:
        max_length = get_setting("search.max_length", DEFAULT_MAX_SEARCH_LENGTH)

    start = max(1, math.ceil(target / per_symbol), min_length(validator, symbols, sep))

    for length in range(start, max_length + 1):
        estimate = estimate_entropy(symbols, length, sep, validator, **estimate_kwargs)
        logger.debug(f"Search length={length}: {estimate:.2f} bits (target {target:g})")

        if estimate == 0.0:
            raise ImpossibleConstraint("Entropy requirement can never be met.")

        if estimate >= target:
            return length, estimate

    raise ImpossibleConstraint(
        f"Entropy requirement not met within {max_length} symbols."
    )


__all__ = [
    'estimate_entropy',
    'find_min_length',
    'acceptance_rate',
    'DEFAULT_SAMPLES',
    'DEFAULT_SAFETY_MARGIN',
]
