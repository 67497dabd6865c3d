"""
Password options and the bounds the form and CLI enforce on them.
"""

from __future__ import annotations

from dataclasses import dataclass

MIN_LENGTH = 1
MAX_LENGTH = 100

# How long the "copied" acknowledgment stays visible.
COPY_FEEDBACK_SECONDS = 2.0


@dataclass(frozen=True)
class PasswordOptions:
    # Character classes. Ignored when `custom` is on.
    lowercase: bool = True
    uppercase: bool = True
    numeric: bool = True
    special: bool = True

    # Custom mode draws every character from `custom_chars` instead.
    custom: bool = False
    custom_chars: str = ""

    length: int = 8

    # Only meaningful when the matching class is on and custom mode is off.
    min_numeric: int = 1
    min_special: int = 1


DEFAULT_OPTIONS = PasswordOptions()


def clamp_length(value: int) -> int:
    return max(MIN_LENGTH, min(MAX_LENGTH, int(value)))


def max_min_numeric(options: PasswordOptions) -> int:
    """Largest minimum-digit count that still leaves room for the special minimum."""
    if not options.numeric:
        return 0
    return max(0, options.length - (options.min_special if options.special else 0))


def max_min_special(options: PasswordOptions) -> int:
    """Largest minimum-special count that still leaves room for the digit minimum."""
    if not options.special:
        return 0
    return max(0, options.length - (options.min_numeric if options.numeric else 0))


def clamp_min_numeric(options: PasswordOptions, value: int) -> int:
    return max(0, min(max_min_numeric(options), int(value)))


def clamp_min_special(options: PasswordOptions, value: int) -> int:
    return max(0, min(max_min_special(options), int(value)))
