"""
Tests for Sequence Generation
=============================
Tests for generate() and the randomness sources.
"""

import inspect
import os
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from entropass.errors import ImpossibleConstraint, RngInitError
from entropass.generators.random_sources import SecureRandom, SamplingRandom
from entropass.generators.sequence import generate, _draw
from entropass.generators.symbols import SymbolSet
from entropass.generators.validators import MaxBytes, RequireClasses


class TestGenerate:
    """Tests for generate()."""

    def test_single_symbol(self):
        """One draw from "ab" is "a" or "b"."""
        symbols = SymbolSet.from_chars("ab")
        for _ in range(20):
            assert generate(symbols, 1) in ("a", "b")

    def test_length_and_alphabet(self):
        """Output has n characters from the catalogue."""
        symbols = SymbolSet.from_chars("xyz")
        secret = generate(symbols, 16)
        assert len(secret) == 16
        assert set(secret) <= {"x", "y", "z"}

    def test_separator(self):
        """Words are joined with the separator."""
        symbols = SymbolSet(["cat", "dog"])
        secret = generate(symbols, 3, " ")
        parts = secret.split(" ")
        assert len(parts) == 3
        assert all(p in ("cat", "dog") for p in parts)

    def test_validator_always_honoured(self):
        """Every returned secret is accepted by the validator."""
        symbols = SymbolSet.from_chars("abcdef0123")
        check = RequireClasses.from_charsets({"lower": "abcdef", "digit": "0123"})
        for _ in range(50):
            secret = generate(symbols, 6, validator=check, max_attempts=10_000)
            assert check(secret)

    def test_byte_cap_honoured(self):
        """Secrets respect a byte cap that rejects some draws."""
        symbols = SymbolSet(["a", "bb", "ccc", "dddd"])
        check = MaxBytes(9)
        for _ in range(50):
            secret = generate(symbols, 3, " ", check, max_attempts=10_000)
            assert len(secret.encode("utf-8")) <= 9

    def test_max_attempts_exhausted(self):
        """A bounded loop gives up with ImpossibleConstraint."""
        symbols = SymbolSet.from_chars("ab")
        with pytest.raises(ImpossibleConstraint):
            generate(symbols, 4, validator=lambda s: False, max_attempts=50)

    def test_invalid_length(self):
        """Lengths below one are rejected."""
        with pytest.raises(ValueError):
            generate(SymbolSet.from_chars("ab"), 0)

    def test_no_rng_parameter(self):
        """Callers cannot hand generate() a random source."""
        params = inspect.signature(generate).parameters
        assert "rng" not in params
        assert "seed" not in params

    def test_uses_secure_source(self, monkeypatch):
        """Draws for emitted secrets come from SecureRandom."""
        seen = []
        original = SecureRandom.choices

        def spy(self, population, k=1):
            seen.append(type(self))
            return original(self, population, k)

        monkeypatch.setattr(SecureRandom, "choices", spy)
        generate(SymbolSet.from_chars("ab"), 4)
        assert seen == [SecureRandom]


class TestRandomSources:
    """Tests for SecureRandom and SamplingRandom."""

    def test_secure_choice(self):
        """SecureRandom picks from the sequence."""
        rng = SecureRandom()
        assert rng.choice("abc") in "abc"
        assert len(rng.choices(["x", "y"], k=7)) == 7

    def test_secure_draws_through_system_random(self, monkeypatch):
        """choice() takes its index from the wrapped SystemRandom."""
        rng = SecureRandom()
        monkeypatch.setattr(rng._rng, "randrange", lambda n: n - 1)
        assert rng.choice("abc") == "c"
        assert rng.choices(["x", "y"], k=3) == ["y", "y", "y"]

    def test_secure_empty(self):
        """Choosing from nothing fails."""
        with pytest.raises(IndexError):
            SecureRandom().choice([])

    def test_sampling_seeded_reproducible(self):
        """Equal seeds give equal streams."""
        a = SamplingRandom(seed=42)
        b = SamplingRandom(seed=42)
        population = list("abcdefgh")
        assert a.choices(population, k=50) == b.choices(population, k=50)

    def test_draw_with_sampling_source(self):
        """The draw primitive works with either source."""
        symbols = SymbolSet(["cat", "dog"])
        out = _draw(symbols, 2, "-", SamplingRandom(seed=1))
        assert out.count("-") == 1

    def test_secure_init_failure(self, monkeypatch):
        """A broken OS entropy source is fatal for SecureRandom."""
        def broken(n):
            raise NotImplementedError("no entropy")

        monkeypatch.setattr(os, "urandom", broken)
        with pytest.raises(RngInitError):
            SecureRandom()
        with pytest.raises(RngInitError):
            generate(SymbolSet.from_chars("ab"), 2)

    def test_sampling_init_failure(self, monkeypatch):
        """A broken OS entropy source is fatal for SamplingRandom too."""
        def broken(n):
            raise OSError("no entropy")

        monkeypatch.setattr(os, "urandom", broken)
        with pytest.raises(RngInitError):
            SamplingRandom()
