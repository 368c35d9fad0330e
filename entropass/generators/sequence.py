#!/usr/bin/env python3
"""
Sequence Generation
===================
Draws n symbols with replacement and joins them into a candidate secret.

generate() is the only function that produces a secret meant to be shown
to the user. It always uses a SecureRandom built on the spot and accepts
no random source from the caller.
"""

import logging
from typing import Optional, Union

from entropass.errors import ImpossibleConstraint
from entropass.generators.random_sources import SecureRandom, SamplingRandom
from entropass.generators.symbols import SymbolSet
from entropass.generators.validators import Validator

logger = logging.getLogger(__name__)


def _check_length(n: int) -> None:
    if n < 1:
        raise ValueError(f"Sequence length must be at least 1, got {n}")


def _draw(symbols: SymbolSet, n: int, sep: str,
          rng: Union[SecureRandom, SamplingRandom]) -> str:
    """Draw n symbols uniformly with replacement and join them with sep."""
    return sep.join(rng.choices(symbols.symbols, k=n))


def generate(symbols: SymbolSet,
             n: int,
             sep: str = "",
             validator: Optional[Validator] = None,
             max_attempts: Optional[int] = None) -> str:
    """
    Generate a secret of n symbols joined by sep.

    Draws are repeated until the validator accepts the candidate
    (rejection sampling). Expected attempts are 1 / acceptance rate, so
    callers should confirm with estimate_entropy() that the validator is
    satisfiable before calling this.

    Parameters
    ----------
    symbols : SymbolSet
        Catalogue to draw from
    n : int
        Number of symbols (>= 1)
    sep : str
        Separator placed between symbols
    validator : callable, optional
        Acceptance predicate on the joined string. None accepts everything.
    max_attempts : int, optional
        Give up after this many rejected draws. None retries forever.

    Returns
    -------
    str
        The accepted secret

    Raises
    ------
    ImpossibleConstraint
        If max_attempts draws were all rejected
    RngInitError
        If the OS entropy source is unavailable
    """
    _check_length(n)
    rng = SecureRandom()

    attempts = 0
    while True:
        candidate = _draw(symbols, n, sep, rng)
        if validator is None or validator(candidate):
            if attempts:
                logger.debug(f"Accepted after {attempts} rejected draws")
            return candidate

        attempts += 1
        if max_attempts is not None and attempts >= max_attempts:
            logger.warning(f"Gave up after {attempts} rejected draws (n={n})")
            raise ImpossibleConstraint(
                f"No acceptable secret found in {attempts} attempts."
            )


__all__ = ['generate']
