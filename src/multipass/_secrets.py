"""Extra-secret variants and normalization.

Each raw extras entry is classified into exactly one variant:

| Raw entry                               | Variant        |
|-----------------------------------------|----------------|
| str, int, float (not bool)              | PlainSecret    |
| mapping with a usable secret/password   | LabeledSecret  |
| anything else, or empty after trimming  | InvalidSecret  |

Only PlainSecret and LabeledSecret carry text that can be offered to a
Verifier. The label is metadata and never takes part in matching.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

# Mapping keys tried in order for the secret text of a labeled entry.
# "password" is the sub-field name of the admin repeater.
SECRET_KEYS = ("secret", "password")


@dataclass(frozen=True, slots=True)
class PlainSecret:
    """A bare secret string (or number coerced to text)."""

    text: str


@dataclass(frozen=True, slots=True)
class LabeledSecret:
    """A secret with an administrator-facing label."""

    label: str | None
    text: str


@dataclass(frozen=True, slots=True)
class InvalidSecret:
    """An entry that cannot be offered to a verifier."""

    raw: Any
    reason: str


ExtraSecret: TypeAlias = PlainSecret | LabeledSecret | InvalidSecret


def is_list_shaped(raw: Any) -> bool:
    """Only lists and tuples count; strings and mappings do not."""
    return isinstance(raw, (list, tuple))


def parse_extra(raw: Any) -> ExtraSecret:
    """Classify a single raw extras entry."""
    if isinstance(raw, Mapping):
        return _parse_labeled(raw)

    text = _coerce_text(raw)
    if text is None:
        return InvalidSecret(raw, f"unsupported entry type {type(raw).__name__}")
    if not text:
        return InvalidSecret(raw, "empty secret")
    return PlainSecret(text)


def secret_text(secret: ExtraSecret) -> str | None:
    """Text to verify, or None for an invalid entry."""
    match secret:
        case PlainSecret(text=t) | LabeledSecret(text=t):
            return t
        case InvalidSecret():
            return None
    return None  # pragma: no cover


def parse_extras(raw: Any) -> tuple[ExtraSecret, ...]:
    """Classify every entry of a list-shaped extras value.

    A value that is not list-shaped has no entries.
    """
    if not is_list_shaped(raw):
        return ()
    return tuple(parse_extra(entry) for entry in raw)


def normalize_extras(raw: Any) -> tuple[str, ...]:
    """Usable candidate texts, in their original order."""
    texts = (secret_text(s) for s in parse_extras(raw))
    return tuple(t for t in texts if t is not None)


def _parse_labeled(raw: Mapping[Any, Any]) -> ExtraSecret:
    key = next((k for k in SECRET_KEYS if k in raw), None)
    if key is None:
        expected = " or ".join(repr(k) for k in SECRET_KEYS)
        return InvalidSecret(raw, f"mapping has no {expected} key")

    text = _coerce_text(raw[key])
    if text is None:
        return InvalidSecret(
            raw, f"{key!r} must be a string or number, got {type(raw[key]).__name__}"
        )
    if not text:
        return InvalidSecret(raw, "empty secret")

    label = raw.get("label")
    return LabeledSecret(label=None if label is None else str(label), text=text)


def _coerce_text(value: Any) -> str | None:
    """Trimmed text for strings and numbers, None for anything else.

    bool is excluded even though it subclasses int.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)):
        return str(value).strip()
    return None
