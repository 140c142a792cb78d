"""Transport interface.

This is the (small) contract a line transport must satisfy for use by
:class:`sambridge.Session`. It lives outside :mod:`sambridge.protocol` so
that the codec stays free of socket handling.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Transport(ABC):
    """Minimal contract for a line-oriented, ASCII transport."""

    @abstractmethod
    def open(self) -> None:
        """Establish the underlying connection."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying connection. Must be safe to call twice."""

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Send one line; the transport appends the terminator and flushes."""

    @abstractmethod
    def read_line(self, timeout: float) -> str:
        """Return the next line without its terminator.

        Raises :class:`sambridge.errors.SamTimeout` if no complete line is
        available within *timeout* seconds.
        """

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False
