"""Exception types raised by Punktual services."""

from __future__ import annotations


class PunktualError(Exception):
    """Base class for all Punktual errors."""


class ShortLinkError(PunktualError):
    """The short-link service rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
