"""passforge -- configurable random password generation.

Core functions for building a password from character classes or a custom
alphabet, validating the requested minimums, and estimating strength.
"""

import logging
import math
import re
import secrets
import string
from types import MappingProxyType

from passforge.config import DEFAULT_OPTIONS, PasswordOptions

__all__ = [
    "CHARACTER_SETS",
    "DEFAULT_OPTIONS",
    "EmptyAlphabetError",
    "GenerationError",
    "InvalidLengthError",
    "LengthTooShortError",
    "NoCharacterSetError",
    "PasswordOptions",
    "build_password",
    "estimate_entropy",
    "generate",
    "strength_label",
    "strip_whitespace",
    "working_alphabet",
]

logger = logging.getLogger(__name__)

_sysrand = secrets.SystemRandom()


# ── Character classes ──────────────────────────────────────────────────────

CHARACTER_SETS = MappingProxyType({
    "lowercase": string.ascii_lowercase,
    "uppercase": string.ascii_uppercase,
    "numeric":   string.digits,
    "special":   "!@#$%^&*()_+-=[]{}|;:,.<>?",
})

# Order in which enabled classes are concatenated into the working alphabet
_CLASS_ORDER = ("lowercase", "uppercase", "numeric", "special")


# ── Errors ─────────────────────────────────────────────────────────────────


class GenerationError(ValueError):
    """Raised when the requested options cannot produce a password."""

    reason = "invalid"


class EmptyAlphabetError(GenerationError):
    reason = "empty_alphabet"

    def __init__(self) -> None:
        super().__init__("Custom characters cannot be empty")


class LengthTooShortError(GenerationError):
    reason = "length_too_short"

    def __init__(self, required: int) -> None:
        self.required = required
        super().__init__(
            f"Password length must be at least {required} "
            "to meet minimum requirements"
        )


class NoCharacterSetError(GenerationError):
    reason = "no_character_set"

    def __init__(self) -> None:
        super().__init__("Please select at least one character set")


class InvalidLengthError(GenerationError):
    reason = "invalid_length"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Password length must be at least 1 (got {length})")


# ── Password generation ────────────────────────────────────────────────────


def strip_whitespace(chars: str) -> str:
    """Remove every whitespace character from *chars*."""
    return re.sub(r"\s+", "", chars)


def _pick(alphabet: str, count: int, rng) -> list[str]:
    return [alphabet[rng.randrange(len(alphabet))] for _ in range(count)]


def _shuffle(chars: list[str], rng) -> None:
    # Fisher-Yates
    for i in range(len(chars) - 1, 0, -1):
        j = rng.randrange(i + 1)
        chars[i], chars[j] = chars[j], chars[i]


def working_alphabet(options: PasswordOptions) -> str:
    """Return the alphabet the remaining characters are drawn from.

    In custom mode this is the whitespace-stripped custom input; otherwise
    the enabled character classes concatenated in catalog order.
    """
    if options.custom:
        return strip_whitespace(options.custom_chars)
    return "".join(
        CHARACTER_SETS[name] for name in _CLASS_ORDER if getattr(options, name)
    )


def build_password(options: PasswordOptions = DEFAULT_OPTIONS, rng=None) -> str:
    """Build a random password satisfying *options*.

    *rng* is any object with a ``randrange(n)`` method (``random.Random``
    for reproducible output). Defaults to :class:`secrets.SystemRandom`.

    Raises :class:`InvalidLengthError`, :class:`EmptyAlphabetError`,
    :class:`LengthTooShortError` or :class:`NoCharacterSetError` when the
    options cannot be satisfied.
    """
    rng = rng or _sysrand

    if options.length < 1:
        raise InvalidLengthError(options.length)

    if options.custom:
        alphabet = working_alphabet(options)
        if not alphabet:
            raise EmptyAlphabetError()
        return "".join(_pick(alphabet, options.length, rng))

    total_min_required = (
        (options.min_numeric if options.numeric else 0)
        + (options.min_special if options.special else 0)
    )
    if total_min_required > options.length:
        raise LengthTooShortError(total_min_required)

    alphabet = working_alphabet(options)
    if not alphabet:
        raise NoCharacterSetError()

    chars: list[str] = []
    if options.numeric and options.min_numeric > 0:
        chars += _pick(CHARACTER_SETS["numeric"], options.min_numeric, rng)
    if options.special and options.min_special > 0:
        chars += _pick(CHARACTER_SETS["special"], options.min_special, rng)

    chars += _pick(alphabet, options.length - len(chars), rng)

    # Mandatory characters must not cluster at the front
    _shuffle(chars, rng)
    return "".join(chars)


def generate(options: PasswordOptions = DEFAULT_OPTIONS, rng=None) -> dict:
    """Generate a password and report the outcome.

    Returns a dict with keys:
        password -- str   ("" when generation failed)
        error    -- str | None  (human-readable validation message)
        reason   -- str | None  ("invalid_length", "empty_alphabet",
                                 "length_too_short", "no_character_set")
        entropy  -- float (bits, 0.0 on failure)
        label    -- str | None  (strength label)
    """
    try:
        password = build_password(options, rng)
    except GenerationError as exc:
        logger.debug("Generation rejected (%s): %s", exc.reason, exc)
        return {
            "password": "",
            "error": str(exc),
            "reason": exc.reason,
            "entropy": 0.0,
            "label": None,
        }

    entropy = estimate_entropy(working_alphabet(options), len(password))
    return {
        "password": password,
        "error": None,
        "reason": None,
        "entropy": round(entropy, 1),
        "label": strength_label(entropy),
    }


# ── Strength estimate ──────────────────────────────────────────────────────

_LABELS = ["Very Weak", "Weak", "Fair", "Strong", "Very Strong"]


def estimate_entropy(alphabet: str, length: int) -> float:
    """Bits of entropy for *length* uniform draws from *alphabet*.

    Repeated characters in the alphabet count once.
    """
    pool = len(set(alphabet))
    if pool < 2 or length <= 0:
        return 0.0
    return length * math.log2(pool)


def strength_label(entropy: float) -> str:
    if entropy < 28:
        score = 0
    elif entropy < 36:
        score = 1
    elif entropy < 50:
        score = 2
    elif entropy < 65:
        score = 3
    else:
        score = 4
    return _LABELS[score]
