"""Resource: the matcher's view of a password-protected resource."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Resource:
    """A resource with one primary secret and an ordered extras list.

    Built fresh per request from host data; never persisted. ``extras`` is
    kept exactly as supplied (possibly malformed) and only normalized when
    matched.
    """

    id: str
    primary_secret: str | None = None
    extras: Any = ()

    @property
    def is_protected(self) -> bool:
        """A resource without a primary secret is not password protected."""
        return bool(self.primary_secret)
