"""Recompute-on-change generator state shared by the web page and the CLI."""

from __future__ import annotations

import dataclasses
import logging
import time

import pyperclip

from passforge import generate
from passforge.config import (
    COPY_FEEDBACK_SECONDS,
    DEFAULT_OPTIONS,
    PasswordOptions,
    clamp_length,
    clamp_min_numeric,
    clamp_min_special,
)

logger = logging.getLogger(__name__)

_FLAGS = ("lowercase", "uppercase", "numeric", "special", "custom")


class GeneratorSession:
    """Current options, the last generation result and the copy indicator.

    Every change to the options triggers exactly one regeneration; setting a
    field to the value it already holds does not.
    """

    def __init__(
        self,
        options: PasswordOptions | None = None,
        rng=None,
        clock=time.monotonic,
    ) -> None:
        self.options = options or DEFAULT_OPTIONS
        self._rng = rng
        self._clock = clock
        self._copied_at: float | None = None
        self.result: dict = {}
        self.regenerate()

    # ── Options ─────────────────────────────────────────────────────────

    def update(self, **changes) -> dict:
        """Apply field *changes* and regenerate if anything changed.

        Length is clamped to its bounds and each minimum to the room the
        other minimum leaves. Unknown fields raise :class:`TypeError`.
        """
        options = self.options
        for name, value in changes.items():
            if name == "length":
                value = clamp_length(value)
            elif name == "min_numeric":
                value = clamp_min_numeric(options, value)
            elif name == "min_special":
                value = clamp_min_special(options, value)
            options = dataclasses.replace(options, **{name: value})

        if options != self.options:
            self.options = options
            self.regenerate()
        return self.result

    def toggle(self, flag: str) -> dict:
        if flag not in _FLAGS:
            raise ValueError(f"Unknown option flag: {flag!r}")
        return self.update(**{flag: not getattr(self.options, flag)})

    def regenerate(self) -> dict:
        self.result = generate(self.options, self._rng)
        if self.result["password"]:
            self._copied_at = None
        return self.result

    @property
    def password(self) -> str:
        return self.result["password"]

    @property
    def error(self) -> str | None:
        return self.result["error"]

    # ── Clipboard ───────────────────────────────────────────────────────

    def copy(self, writer=None) -> bool:
        """Write the current password to the clipboard.

        *writer* receives the password (default :func:`pyperclip.copy`).
        Failures are logged only; the password and options stay as they are.
        """
        if not self.password:
            return False
        writer = writer or pyperclip.copy
        try:
            writer(self.password)
        except Exception as exc:
            logger.error("Failed to copy: %s", exc)
            return False
        self._copied_at = self._clock()
        return True

    @property
    def copied(self) -> bool:
        """True for a short while after a successful :meth:`copy`."""
        if self._copied_at is None:
            return False
        return self._clock() - self._copied_at < COPY_FEEDBACK_SECONDS
