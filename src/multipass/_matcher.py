"""Credential matcher: first-match-wins search over extra secrets.

match() answers one question for the host: does this proof token verify
against any of the resource's extra secrets, and if so which one?

- No primary secret -> NoMatch without consulting the verifier
- Extras empty or not list-shaped -> NoMatch
- Invalid entries are skipped, never raised
- Extras tried in order; the first verified candidate wins

The matcher never hashes, never inspects the proof, and never mutates the
resource. Substituting the matched secret is the host's job.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from multipass._secrets import LabeledSecret, parse_extras, secret_text
from multipass._types import Verifier

if TYPE_CHECKING:
    from multipass._resource import Resource

VerifyFn: TypeAlias = Callable[[str, str], bool]


@dataclass(frozen=True, slots=True)
class Matched:
    """The proof verified against an extra secret.

    ``secret`` is the trimmed candidate text, not the raw entry. ``index``
    is the entry's position in the raw extras list.
    """

    secret: str
    index: int
    label: str | None = None

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Nothing matched; the host falls back to the primary secret."""

    def __bool__(self) -> bool:
        return False


NO_MATCH = NoMatch()

MatchResult: TypeAlias = Matched | NoMatch


def match(resource: Resource, proof: str, verify: VerifyFn | Verifier) -> MatchResult:
    """Find the first extra secret of ``resource`` that ``proof`` verifies against.

    ``verify`` is either a ``(candidate, proof) -> bool`` callable or an
    object implementing the Verifier protocol.
    """
    if not resource.is_protected:
        return NO_MATCH

    check = _verify_fn(verify)
    for index, secret in enumerate(parse_extras(resource.extras)):
        candidate = secret_text(secret)
        if candidate is None:
            continue
        if check(candidate, proof):
            label = secret.label if isinstance(secret, LabeledSecret) else None
            return Matched(secret=candidate, index=index, label=label)
    return NO_MATCH


def _verify_fn(verify: VerifyFn | Verifier) -> VerifyFn:
    if isinstance(verify, Verifier):
        return verify.verify
    return verify
