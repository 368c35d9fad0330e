"""
Tests for Word Lists
====================
Tests for entropass/wordlists.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from entropass.generators.symbols import SymbolSet
from entropass.wordlists import WORDLIST_MODES, list_wordlists, load_wordlist


class TestWordLists:
    """Tests for bundled word lists."""

    def test_modes(self):
        """Each words mode maps to a bundled list."""
        assert set(WORDLIST_MODES.values()) == set(list_wordlists())

    def test_basic(self):
        """The basic list is short lowercase words."""
        words = load_wordlist("basic")
        assert isinstance(words, SymbolSet)
        assert len(words) > 600
        assert all(w.isalpha() and w.islower() for w in words)

    def test_bip39(self):
        """The BIP39 list has 2048 words: exactly 11 bits each."""
        words = load_wordlist("bip39")
        assert len(words) == 2048
        assert words.base_entropy(1) == 11.0
        assert "abandon" in words

    def test_cached(self):
        """Lists are loaded once."""
        assert load_wordlist("basic") is load_wordlist("basic")

    def test_unknown(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown word list"):
            load_wordlist("klingon")
