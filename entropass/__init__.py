#!/usr/bin/env python3
"""
entropass - Random Secret Generator with Entropy Estimation
===========================================================

Generates random passwords and passphrases from a configurable symbol
alphabet and estimates how many bits of entropy survive constraints such
as a maximum byte length or required character classes.

Quick Start
-----------
    from entropass import Entropass

    kit = Entropass()

    # 64+ bits of lower case and digits
    symbols = kit.symbols_for("chars", classes=["lower", "digit"])
    plan = kit.plan(symbols, entropy=64)
    secrets = kit.generate(plan, count=3)

    # Six-word passphrase that fits in 40 bytes
    words = kit.symbols_for("words-basic")
    plan = kit.plan(words, length=6, sep=" ",
                    validator=kit.validator_for(max_bytes=40))

Modules
-------
    entropass.generators - Symbol catalogue, validators, generation, estimation
    entropass.wordlists  - Bundled word lists
    entropass.config     - Configuration and character classes

CLI Usage
---------
    python -m entropass generate -a -A -0 -E 80
    python -m entropass generate -m words-basic -L 6 -M 40
    python -m entropass estimate -m words-bip39 -L 5
    python -m entropass classes
"""

__version__ = "0.3.0"
__author__ = "entropass"

import logging
from dataclasses import dataclass
from typing import List, Optional

# =============================================================================
# Submodule Imports
# =============================================================================

from . import generators
from . import wordlists
from . import config

from .errors import (
    EntropassError,
    EmptySymbolSet,
    RngInitError,
    ImpossibleConstraint,
    EntropyRequirementNotMet,
)

from .generators import (
    SymbolSet,
    SecureRandom,
    SamplingRandom,
    Validator,
    AcceptAll,
    accept_all,
    MaxBytes,
    RequireClasses,
    AllOf,
    combine,
    generate as generate_secret,
    estimate_entropy,
    find_min_length,
)

from .settings import resolve_path
from .wordlists import WORDLIST_MODES, load_wordlist

from .config import (
    Config,
    get_config,
    load_env,
    CHARACTER_CLASSES,
    get_charset,
    list_classes,
)

logger = logging.getLogger(__name__)


MODES = ["chars"] + list(WORDLIST_MODES)


# =============================================================================
# Generation Plan
# =============================================================================

@dataclass
class Plan:
    """A resolved generation setting: what to draw, how long, how strong."""
    symbols: SymbolSet
    length: int
    estimate: float
    sep: str = ""
    validator: Optional[Validator] = None
    strength: Optional[str] = None

    @property
    def is_weak(self) -> bool:
        return self.strength in ("weak", "critical")


# =============================================================================
# Entropass Main Class
# =============================================================================

class Entropass:
    """
    Main interface for secret generation and entropy estimation.

    Combines symbol catalogues, validators and the estimator into the
    workflow of choosing a length, checking strength, and generating.

    Attributes
    ----------
    config : Config
        Sampling, threshold and default-length settings

    Examples
    --------
        >>> kit = Entropass()
        >>> symbols = kit.symbols_for("chars", classes=["lower"])
        >>> plan = kit.plan(symbols, length=20)
        >>> [secret] = kit.generate(plan)
        >>> len(secret)
        20
    """

    def __init__(self, config: Config = None):
        """
        Initialize with configuration.

        Parameters
        ----------
        config : Config, optional
            Settings to use. Loaded from app.yaml and the environment
            when omitted.
        """
        self._config = config or get_config()

    @property
    def config(self) -> Config:
        """Access configuration."""
        return self._config

    # -------------------------------------------------------------------------
    # Building blocks
    # -------------------------------------------------------------------------

    def symbols_for(self,
                    mode: str = "chars",
                    classes: Optional[List[str]] = None,
                    symbols: Optional[str] = None,
                    wordlist: Optional[str] = None) -> SymbolSet:
        """
        Build the symbol catalogue for a generator mode.

        Parameters
        ----------
        mode : str
            "chars" or a word-list mode ("words-basic", "words-bip39")
        classes : list, optional
            Character class names for chars mode (see CHARACTER_CLASSES)
        symbols : str, optional
            Extra characters for chars mode
        wordlist : str, optional
            Path to a newline-delimited word list. Overrides the mode's
            bundled list (and the ENTROPASS_WORDLIST setting).

        Raises
        ------
        ValueError
            Unknown mode or class name
        EmptySymbolSet
            No characters selected, or an empty word list
        OSError
            Word list file could not be read
        """
        if mode == "chars":
            chars = get_charset(classes or []) + (symbols or "")
            if not chars:
                raise EmptySymbolSet("No characters.")
            return SymbolSet.from_chars(chars)

        if mode not in WORDLIST_MODES:
            raise ValueError(f"Unknown mode: {mode}. Available: {', '.join(MODES)}")

        path = wordlist or self._config.wordlist
        if path:
            logger.debug(f"Loading word list from {path}")
            return SymbolSet.from_file(resolve_path(path))
        return load_wordlist(WORDLIST_MODES[mode])

    def validator_for(self,
                      max_bytes: Optional[int] = None,
                      require_classes=None) -> Validator:
        """
        Build the validator for the given constraints.

        Parameters
        ----------
        max_bytes : int, optional
            Maximum UTF-8 length of the output
        require_classes : list or dict, optional
            Character classes that must all appear: a list of class
            names, or a dict mapping a label to its characters

        Returns accept_all when no constraint is given.
        """
        required = None
        if isinstance(require_classes, dict):
            required = RequireClasses.from_charsets(require_classes)
        elif require_classes:
            required = RequireClasses.from_names(require_classes)

        return combine(
            MaxBytes(max_bytes) if max_bytes is not None else None,
            required,
        )

    def default_length(self, mode: str) -> int:
        """Default sequence length for a mode."""
        if mode == "chars":
            return self._config.default_chars_length
        return self._config.default_words_length

    def estimate(self,
                 symbols: SymbolSet,
                 length: int,
                 sep: str = "",
                 validator: Optional[Validator] = None) -> float:
        """Estimate entropy with the configured sample count and margin."""
        return estimate_entropy(
            symbols, length, sep, validator,
            samples=self._config.samples,
            safety_margin=self._config.safety_margin,
        )

    # -------------------------------------------------------------------------
    # Planning
    # -------------------------------------------------------------------------

    def plan(self,
             symbols: SymbolSet,
             length: Optional[int] = None,
             entropy: Optional[float] = None,
             sep: str = "",
             validator: Optional[Validator] = None,
             default_length: Optional[int] = None) -> Plan:
        """
        Resolve the sequence length and its estimated entropy.

        - length and entropy: estimate at length; fail if below entropy
        - entropy only: search the shortest length meeting entropy
        - length only, or neither: estimate at length (or default_length)
          and rate its strength

        Raises
        ------
        EntropyRequirementNotMet
            Explicit length is too short for the explicit entropy target
        ImpossibleConstraint
            No length can meet the entropy target, or nothing of the
            given length is accepted
        """
        if entropy is not None and length is None:
            length, estimate = find_min_length(
                symbols, entropy, sep, validator,
                max_length=self._config.max_search_length,
                samples=self._config.samples,
                safety_margin=self._config.safety_margin,
            )
            return Plan(symbols, length, estimate, sep, validator)

        if length is None:
            length = default_length or self._config.default_chars_length

        estimate = self.estimate(symbols, length, sep, validator)

        if estimate == 0.0:
            raise ImpossibleConstraint(
                f"No sequence of {length} symbols satisfies the constraints."
            )

        if entropy is not None:
            if estimate < entropy:
                raise EntropyRequirementNotMet(entropy, estimate)
            return Plan(symbols, length, estimate, sep, validator)

        return Plan(symbols, length, estimate, sep, validator,
                    strength=self._config.strength(estimate))

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def generate(self, plan: Plan, count: int = 1) -> List[str]:
        """
        Generate `count` secrets following a plan.

        Secrets always come from the OS CSPRNG.
        """
        return [
            generate_secret(
                plan.symbols, plan.length, plan.sep, plan.validator,
                max_attempts=self._config.max_attempts,
            )
            for _ in range(count)
        ]


# =============================================================================
# Public API
# =============================================================================

__all__ = [
    # Version
    '__version__',

    # Main class
    'Entropass',
    'Plan',
    'MODES',

    # Core
    'SymbolSet',
    'SecureRandom',
    'SamplingRandom',
    'generate_secret',
    'estimate_entropy',
    'find_min_length',

    # Validators
    'Validator',
    'AcceptAll',
    'accept_all',
    'MaxBytes',
    'RequireClasses',
    'AllOf',
    'combine',

    # Errors
    'EntropassError',
    'EmptySymbolSet',
    'RngInitError',
    'ImpossibleConstraint',
    'EntropyRequirementNotMet',

    # Word lists
    'WORDLIST_MODES',
    'load_wordlist',

    # Config
    'Config',
    'get_config',
    'load_env',
    'CHARACTER_CLASSES',
    'get_charset',
    'list_classes',

    # Submodules
    'generators',
    'wordlists',
    'config',
]
