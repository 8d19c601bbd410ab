"""multipass: accept more than one password for a protected resource.

All public types are exported from this module for flat imports:

    from multipass import Resource, match, Matched, PortableHashVerifier
"""

__version__ = "0.1.0"

# Store config
from multipass._config import ConfigParseError, load_store, parse_store

# Host integration
from multipass._gate import PasswordGate

# Matcher
from multipass._matcher import NO_MATCH, Matched, MatchResult, NoMatch, match

# Proof tokens
from multipass._proof import (
    COOKIE_PREFIX,
    PORTABLE_HASH_PREFIX,
    PortableHashVerifier,
    cookie_hash_for,
    cookie_name,
    extract_proof,
    unslash,
)

# Extras providers
from multipass._providers import (
    DEFAULT_EXTRAS_FIELD,
    FieldExtrasProvider,
    FilteredExtrasProvider,
    StaticExtrasProvider,
)
from multipass._resource import Resource

# Extra-secret variants
from multipass._secrets import (
    ExtraSecret,
    InvalidSecret,
    LabeledSecret,
    PlainSecret,
    is_list_shaped,
    normalize_extras,
    parse_extra,
    parse_extras,
    secret_text,
)
from multipass._store import ResourceRecord, ResourceStore
from multipass._types import ExtrasFilter, ExtrasProvider, RawExtras, Verifier
from multipass._validation import ExtrasIssue, validate_extras

__all__ = [
    # Protocols
    "Verifier",
    "ExtrasProvider",
    "ExtrasFilter",
    "RawExtras",
    # Extra-secret variants
    "PlainSecret",
    "LabeledSecret",
    "InvalidSecret",
    "ExtraSecret",
    "parse_extra",
    "parse_extras",
    "normalize_extras",
    "secret_text",
    "is_list_shaped",
    # Matcher
    "Resource",
    "Matched",
    "NoMatch",
    "NO_MATCH",
    "MatchResult",
    "match",
    # Providers
    "DEFAULT_EXTRAS_FIELD",
    "FieldExtrasProvider",
    "StaticExtrasProvider",
    "FilteredExtrasProvider",
    # Store
    "ResourceRecord",
    "ResourceStore",
    "ConfigParseError",
    "parse_store",
    "load_store",
    # Validation
    "ExtrasIssue",
    "validate_extras",
    # Proof tokens
    "COOKIE_PREFIX",
    "PORTABLE_HASH_PREFIX",
    "PortableHashVerifier",
    "cookie_hash_for",
    "cookie_name",
    "extract_proof",
    "unslash",
    # Host integration
    "PasswordGate",
]
