"""Proof tokens: the post-password cookie and its portable hash.

After a visitor submits a password, the host stores a phpass "portable"
hash of it in a cookie named ``wp-postpass_<cookie hash>``. That hash is
the proof token: it can be checked against a candidate secret but never
turned back into the submitted text.

Hashing and verification use passlib's ``phpass`` handler.
"""

from __future__ import annotations

import hashlib
import logging
import re
from collections.abc import Mapping

from passlib.hash import phpass

logger = logging.getLogger(__name__)

COOKIE_PREFIX = "wp-postpass_"

# Portable hashes at 2**13 rounds start with this; anything else is rejected
# before matching is attempted.
PORTABLE_HASH_PREFIX = "$P$B"
PORTABLE_HASH_ROUNDS = 13

_SLASHED = re.compile(r"\\(.?)", re.DOTALL)


def cookie_hash_for(site_url: str) -> str:
    """Cookie suffix for a site: md5 hex digest of its URL."""
    return hashlib.md5(site_url.encode("utf-8")).hexdigest()  # noqa: S324


def cookie_name(cookie_hash: str) -> str:
    return f"{COOKIE_PREFIX}{cookie_hash}"


def unslash(value: str) -> str:
    """Remove backslash escaping (``\\x`` -> ``x``, ``\\\\`` -> ``\\``)."""
    return _SLASHED.sub(r"\1", value)


def extract_proof(cookies: Mapping[str, str], cookie_hash: str) -> str | None:
    """The proof token from request cookies, or None if absent or unrecognized."""
    raw = cookies.get(cookie_name(cookie_hash))
    if not isinstance(raw, str):
        return None
    proof = unslash(raw)
    if not proof.startswith(PORTABLE_HASH_PREFIX):
        logger.debug("ignoring post-password cookie without portable hash prefix")
        return None
    return proof


class PortableHashVerifier:
    """Verifier backed by phpass portable hashes.

    ``hash()`` mints the token a browser would hold after submitting a
    secret; ``verify()`` is the host's one-way comparison.
    """

    def __init__(self, rounds: int = PORTABLE_HASH_ROUNDS) -> None:
        self.rounds = rounds
        self._handler = phpass.using(rounds=rounds)

    def hash(self, secret: str) -> str:
        return self._handler.hash(secret)

    def verify(self, candidate: str, proof: str, /) -> bool:
        """True when ``proof`` is a hash of ``candidate``.

        Malformed proofs verify as False rather than raising.
        """
        try:
            return phpass.verify(candidate, proof)
        except (ValueError, TypeError):
            return False
