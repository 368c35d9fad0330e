#!/usr/bin/env python3
"""
Secret Generators
=================
Symbol catalogue, validators, sequence generation and entropy estimation.

Modules:
- symbols: SymbolSet catalogue
- random_sources: SecureRandom (emitted secrets) and SamplingRandom (estimation)
- validators: acceptance predicates (MaxBytes, RequireClasses, AllOf)
- sequence: generate() with rejection sampling
- entropy: estimate_entropy() and find_min_length()
"""

from .symbols import SymbolSet
from .random_sources import SecureRandom, SamplingRandom
from .validators import (
    Validator,
    AcceptAll,
    accept_all,
    MaxBytes,
    RequireClasses,
    AllOf,
    combine,
)
from .sequence import generate
from .entropy import estimate_entropy, find_min_length


__all__ = [
    # Catalogue
    'SymbolSet',
    # Random sources
    'SecureRandom',
    'SamplingRandom',
    # Validators
    'Validator',
    'AcceptAll',
    'accept_all',
    'MaxBytes',
    'RequireClasses',
    'AllOf',
    'combine',
    # Generation and estimation
    'generate',
    'estimate_entropy',
    'find_min_length',
]
