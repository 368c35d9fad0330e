"""
Tests for Validation Predicates
===============================
Tests for entropass/generators/validators.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from entropass.generators.symbols import SymbolSet
from entropass.generators.validators import (
    accept_all,
    MaxBytes,
    RequireClasses,
    AllOf,
    combine,
    is_trivial,
    min_length,
    joined_bytes,
)


@pytest.fixture
def words():
    """Words of one to four bytes."""
    return SymbolSet(["a", "bb", "ccc", "dddd"])


class TestAcceptAll:
    """Tests for the always-accept validator."""

    def test_accepts_everything(self):
        """Every string passes."""
        assert accept_all("")
        assert accept_all("anything at all")

    def test_trivial(self, words):
        """Always trivially satisfied."""
        assert accept_all.is_trivial(words, 5, " ")
        assert is_trivial(accept_all, words, 5, " ")

    def test_none_is_trivial(self, words):
        """A missing validator is treated as accept-all."""
        assert is_trivial(None, words, 3, "")
        assert min_length(None, words) == 1


class TestMaxBytes:
    """Tests for the byte-length cap."""

    def test_ascii(self):
        """ASCII characters count one byte each."""
        check = MaxBytes(5)
        assert check("abcde")
        assert not check("abcdef")

    def test_utf8(self):
        """Multi-byte characters count their encoded length."""
        check = MaxBytes(1)
        assert check("e")
        assert not check("é")

    def test_negative_limit(self):
        """Negative limits are rejected."""
        with pytest.raises(ValueError):
            MaxBytes(-1)

    def test_trivial_when_longest_fits(self, words):
        """Trivial exactly when the longest joined output fits."""
        # 3 * 4 bytes + 2 separators
        assert joined_bytes([4, 4, 4], 3, " ") == 14
        assert MaxBytes(14).is_trivial(words, 3, " ")
        assert not MaxBytes(13).is_trivial(words, 3, " ")

    def test_separator_bytes(self, words):
        """Separators count toward the byte total."""
        assert MaxBytes(12).is_trivial(words, 3, "")
        assert not MaxBytes(12).is_trivial(words, 3, "--")

    def test_plain_function_not_trivial(self, words):
        """Plain callables never take the cheap path."""
        assert not is_trivial(lambda s: True, words, 1, "")


class TestRequireClasses:
    """Tests for character class coverage."""

    def test_from_names(self):
        """Registered class names resolve to their characters."""
        check = RequireClasses.from_names(["lower", "digit"])
        assert check.names == ("lower", "digit")
        assert check("abc1")
        assert not check("abcd")
        assert not check("1234")

    def test_unknown_class(self):
        """Unknown class names are rejected."""
        with pytest.raises(ValueError, match="Unknown character class"):
            RequireClasses.from_names(["emoji"])

    def test_from_charsets(self):
        """Custom class definitions work."""
        check = RequireClasses.from_charsets({"vowel": "aeiou", "custom": "#%"})
        assert check("xa#")
        assert not check("xa")

    def test_empty_charset_dropped(self):
        """Classes without characters are ignored."""
        check = RequireClasses.from_charsets({"none": "", "lower": "ab"})
        assert check.names == ("lower",)

    def test_min_length_chars(self):
        """Single characters cover one class each."""
        symbols = SymbolSet.from_chars("ab01")
        check = RequireClasses.from_charsets({"lower": "ab", "digit": "01"})
        assert check.min_length(symbols) == 2
        assert min_length(check, symbols) == 2

    def test_min_length_words(self):
        """A word covering several classes lowers the bound."""
        symbols = SymbolSet(["a1", "bb"])
        check = RequireClasses.from_charsets({"lower": "ab", "digit": "01"})
        assert check.min_length(symbols) == 1

    def test_min_length_separator(self):
        """Classes supplied by the separator lower the bound."""
        symbols = SymbolSet.from_chars("abAB")
        check = RequireClasses.from_charsets({"lower": "ab", "upper": "AB", "digit": "1"})
        assert check.min_length(symbols) == 3
        assert check.min_length(symbols, "1") == 2
        assert min_length(check, symbols, "1") == 2

    def test_min_length_separator_covers_all(self):
        """A separator covering every class still needs two symbols."""
        symbols = SymbolSet.from_chars("xy")
        check = RequireClasses.from_charsets({"digit": "1"})
        assert check.min_length(symbols, "1") == 2

    def test_trivial_when_every_symbol_covers(self):
        """Trivial if every symbol alone satisfies all classes."""
        symbols = SymbolSet(["a1", "b2"])
        check = RequireClasses.from_charsets({"lower": "ab", "digit": "12"})
        assert check.is_trivial(symbols, 1, "")
        assert not check.is_trivial(SymbolSet(["a1", "bb"]), 1, "")


class TestCombinators:
    """Tests for AllOf and combine()."""

    def test_all_of(self):
        """All wrapped validators must accept."""
        check = AllOf(MaxBytes(4), RequireClasses.from_names(["digit"]))
        assert check("ab1")
        assert not check("abc")
        assert not check("abc12")

    def test_all_of_trivial(self, words):
        """Trivial only if every part is trivial."""
        assert AllOf(accept_all, MaxBytes(100)).is_trivial(words, 3, " ")
        assert not AllOf(accept_all, MaxBytes(5)).is_trivial(words, 3, " ")

    def test_all_of_min_length(self):
        """The largest lower bound wins."""
        symbols = SymbolSet.from_chars("aA1")
        check = AllOf(MaxBytes(10), RequireClasses.from_names(["lower", "upper", "digit"]))
        assert check.min_length(symbols) == 3

    def test_combine_none(self):
        """No validators gives accept_all."""
        assert combine(None, None) is accept_all

    def test_combine_single(self):
        """A single validator is returned unchanged."""
        check = MaxBytes(3)
        assert combine(None, check) is check

    def test_combine_many(self):
        """Several validators are wrapped in AllOf."""
        combined = combine(MaxBytes(3), MaxBytes(5))
        assert isinstance(combined, AllOf)
        assert len(combined.validators) == 2
