"""Error type shared by all fallible camera operations."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Broad category of an :class:`EyeError`."""

    NOT_SUPPORTED = "not supported"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class EyeError(Exception):
    """Raised when a device, stream or context operation fails.

    ``error`` is an optional message or underlying exception that describes the
    failure in more detail than the kind alone.
    """

    def __init__(self, kind: ErrorKind, error: str | BaseException | None = None) -> None:
        super().__init__(kind, error)
        self.kind = kind
        self.error = error

    def __str__(self) -> str:
        if self.error is None:
            return str(self.kind)
        return str(self.error)