#!/usr/bin/env python3
"""
Configuration Management
========================
Loads generation settings from configs/app.yaml, with overrides from a
.env file or the environment.
Provides the named character classes used by chars mode.
"""

import os
import string
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

from entropass.settings import get_setting


# =============================================================================
# Character Classes
# =============================================================================
# Named character sets selectable in chars mode. Users can combine these
# or pass their own symbols.

CHARACTER_CLASSES = {
    "lower": {
        "chars": string.ascii_lowercase,
        "description": "Lower case letters a-z",
    },
    "upper": {
        "chars": string.ascii_uppercase,
        "description": "Upper case letters A-Z",
    },
    "digit": {
        "chars": string.digits,
        "description": "Digits 0-9",
    },
    "symbol": {
        "chars": string.punctuation,
        "description": "All printable ASCII symbols (no space)",
    },
}


def get_charset(names) -> str:
    """
    Resolve character class names to the concatenated characters.

    Args:
        names: Iterable of class names (e.g., ["lower", "digit"])

    Returns:
        Characters of all named classes, in the order given

    Raises:
        ValueError: If a class name is not found
    """
    chars = []
    for name in names:
        info = CHARACTER_CLASSES.get(name)
        if info is None:
            available = ', '.join(sorted(CHARACTER_CLASSES.keys()))
            raise ValueError(
                f"Unknown character class '{name}'. "
                f"Available classes: {available}"
            )
        chars.append(info["chars"])
    return ''.join(chars)


def list_classes() -> dict:
    """List all character classes with descriptions."""
    return {
        name: {
            "chars": c["chars"],
            "size": len(c["chars"]),
            "description": c["description"],
        }
        for name, c in CHARACTER_CLASSES.items()
    }


# =============================================================================
# Application Configuration
# =============================================================================

@dataclass
class Config:
    """Application configuration"""
    samples: Optional[int] = None
    safety_margin: Optional[float] = None
    critical_bits: Optional[float] = None
    warn_bits: Optional[float] = None
    default_chars_length: Optional[int] = None
    default_words_length: Optional[int] = None
    max_attempts: Optional[int] = None
    max_search_length: Optional[int] = None
    wordlist: Optional[str] = None

    def __post_init__(self):
        if self.samples is None:
            self.samples = int(get_setting("entropy.samples", 100_000))
        if self.safety_margin is None:
            self.safety_margin = float(get_setting("entropy.safety_margin", 1.05))
        if self.critical_bits is None:
            self.critical_bits = float(get_setting("entropy.critical_bits", 45.0))
        if self.warn_bits is None:
            self.warn_bits = float(get_setting("entropy.warn_bits", 55.0))
        if self.default_chars_length is None:
            self.default_chars_length = int(get_setting("generation.default_chars_length", 12))
        if self.default_words_length is None:
            self.default_words_length = int(get_setting("generation.default_words_length", 6))
        if self.max_attempts is None:
            self.max_attempts = get_setting("generation.max_attempts")
        if self.max_search_length is None:
            self.max_search_length = int(get_setting("search.max_length", 4096))

    def strength(self, bits: float) -> str:
        """Classify an entropy estimate as 'critical', 'weak' or 'ok'."""
        if bits < self.critical_bits:
            return "critical"
        if bits < self.warn_bits:
            return "weak"
        return "ok"


def load_env(env_path: Path = None) -> dict:
    """Load environment variables from .env file."""
    if env_path is None:
        # Look for .env in the working directory
        env_path = Path.cwd() / '.env'

    env_vars = {}
    if env_path.exists():
        for line in env_path.read_text().splitlines():
            line = line.strip()
            if '=' in line and not line.startswith('#'):
                key, value = line.split('=', 1)
                env_vars[key.strip()] = value.strip()
                # Also set in os.environ for modules that use it directly
                os.environ.setdefault(key.strip(), value.strip())

    return env_vars


def _env(env: dict, key: str, cast=str):
    value = env.get(key) or os.environ.get(key)
    if value is None or value == '':
        return None
    try:
        return cast(value)
    except ValueError:
        raise ValueError(f"Invalid value for {key}: {value!r}") from None


def get_config(env_path: Path = None) -> Config:
    """Get configuration from settings and environment."""
    env = load_env(env_path)

    return Config(
        samples=_env(env, 'ENTROPASS_SAMPLES', int),
        safety_margin=_env(env, 'ENTROPASS_SAFETY_MARGIN', float),
        max_attempts=_env(env, 'ENTROPASS_MAX_ATTEMPTS', int),
        wordlist=_env(env, 'ENTROPASS_WORDLIST'),
    )

