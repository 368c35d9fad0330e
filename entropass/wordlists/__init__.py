#!/usr/bin/env python3
"""
Word List Loader
================
Static word lists for passphrase modes.

- basic: short common English words bundled with the package
- bip39: the 2048-word BIP39 list shipped by the `mnemonic` library

Usage:
    from entropass.wordlists import load_wordlist, WORDLIST_MODES

    words = load_wordlist("basic")       # SymbolSet
    words = load_wordlist(WORDLIST_MODES["words-bip39"])
"""

from functools import lru_cache
from pathlib import Path

from mnemonic import Mnemonic

from entropass.generators.symbols import SymbolSet
from entropass.settings import get_setting


WORDLISTS_DIR = Path(__file__).parent

# CLI mode -> word list name
WORDLIST_MODES = {
    "words-basic": "basic",
    "words-bip39": "bip39",
}


def _load_basic() -> SymbolSet:
    filename = get_setting("wordlists.basic", "basic-words.txt")
    return SymbolSet.from_file(WORDLISTS_DIR / filename)


def _load_bip39() -> SymbolSet:
    language = get_setting("wordlists.bip39_language", "english")
    return SymbolSet.from_lines(Mnemonic(language).wordlist)


_LOADERS = {
    "basic": _load_basic,
    "bip39": _load_bip39,
}


@lru_cache(maxsize=None)
def load_wordlist(name: str) -> SymbolSet:
    """Load a bundled word list by name."""
    loader = _LOADERS.get(name)
    if loader is None:
        available = ', '.join(sorted(_LOADERS))
        raise ValueError(f"Unknown word list '{name}'. Available: {available}")
    return loader()


def list_wordlists() -> list:
    """Names of the bundled word lists."""
    return sorted(_LOADERS)


__all__ = [
    'WORDLIST_MODES',
    'WORDLISTS_DIR',
    'load_wordlist',
    'list_wordlists',
]
