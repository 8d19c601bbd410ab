"""Core protocols and type aliases for multipass.

- RawExtras is whatever the host hands over as the extras list (loosely typed)
- Verifier is the host's one-way comparison port
- ExtrasProvider is the pluggable source of extras for a stored resource
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from multipass._store import ResourceRecord

# Extras arrive untyped: a list of strings, a list of {label, secret} mappings,
# a mix of both, or something else entirely (which never matches).
RawExtras: TypeAlias = Any


@runtime_checkable
class Verifier(Protocol):
    """One-way comparison of a candidate secret against a proof token.

    The matcher treats this as a black box. Implementations must not raise
    for malformed proofs; returning False keeps the resource locked.
    """

    def verify(self, candidate: str, proof: str, /) -> bool: ...


@runtime_checkable
class ExtrasProvider(Protocol):
    """Supply the extra secrets for a stored resource."""

    def extras(self, record: ResourceRecord, /) -> RawExtras: ...


@runtime_checkable
class ExtrasFilter(Protocol):
    """Override or extend extras after the default source has been read."""

    def __call__(self, extras: RawExtras, record: ResourceRecord, /) -> RawExtras: ...
