"""PasswordGate: request-time substitution of a matched extra secret.

The host's own lock check compares the stored primary password against the
proof token. The gate runs first: if the proof verifies against an extra
secret, it hands back a request-scoped copy of the record whose password is
that secret, so the unmodified lock check passes.

Every bail-out returns the record unchanged, which leaves the resource
locked unless the primary password itself was submitted.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from multipass._matcher import Matched, match
from multipass._proof import PortableHashVerifier, extract_proof
from multipass._providers import FieldExtrasProvider
from multipass._resource import Resource
from multipass._secrets import is_list_shaped

if TYPE_CHECKING:
    from collections.abc import Mapping

    from multipass._store import ResourceRecord, ResourceStore
    from multipass._types import ExtrasProvider, Verifier

logger = logging.getLogger(__name__)


class PasswordGate:
    """Host-side glue around match().

    All request context (record, cookies) is passed in explicitly; the gate
    holds only configuration and is safe to share between requests.
    """

    def __init__(
        self,
        store: ResourceStore,
        provider: ExtrasProvider | None = None,
        verifier: Verifier | None = None,
        cookie_hash: str = "",
    ) -> None:
        self.store = store
        self.provider = provider if provider is not None else FieldExtrasProvider()
        self.verifier = verifier if verifier is not None else PortableHashVerifier()
        self.cookie_hash = cookie_hash

    def resource_for(self, record: ResourceRecord) -> Resource:
        """Build the matcher's view of a record through the provider."""
        return Resource(
            id=record.id,
            primary_secret=record.password,
            extras=self.provider.extras(record),
        )

    def override_password(
        self, record: ResourceRecord | None, cookies: Mapping[str, str]
    ) -> ResourceRecord | None:
        """Substitute a matching extra secret for this request only."""
        if record is None:
            return None
        if not record.password:
            logger.debug("resource %s: no password set, skipping", record.id)
            return record

        resource = self.resource_for(record)
        if not resource.extras or not is_list_shaped(resource.extras):
            logger.debug("resource %s: no extra passwords", record.id)
            return record

        proof = extract_proof(cookies, self.cookie_hash)
        if proof is None:
            logger.debug("resource %s: no usable password cookie", record.id)
            return record

        result = match(resource, proof, self.verifier)
        if not isinstance(result, Matched):
            logger.debug("resource %s: no extra password matched", record.id)
            return record

        logger.debug("resource %s: extra password #%d matched", record.id, result.index)
        return dataclasses.replace(record, password=result.secret)

    def password_required(
        self, record: ResourceRecord | None, cookies: Mapping[str, str]
    ) -> bool:
        """The host's unmodified lock check against the record's password."""
        if record is None or not record.password:
            return False
        proof = extract_proof(cookies, self.cookie_hash)
        if proof is None:
            return True
        return not self.verifier.verify(record.password, proof)

    def unlock(self, resource_id: str, cookies: Mapping[str, str]) -> bool:
        """True when the request may see the resource.

        An unknown id stays locked.
        """
        record = self.store.get(resource_id)
        if record is None:
            logger.debug("resource %s: not found", resource_id)
            return False
        effective = self.override_password(record, cookies)
        return not self.password_required(effective, cookies)
