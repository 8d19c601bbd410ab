"""Administrator diagnostics for extras configuration.

match() skips malformed entries silently. validate_extras() reports the
same entries so a misconfigured field can be surfaced instead of being
quietly ignored. Secret values are never logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from multipass._secrets import InvalidSecret, is_list_shaped, parse_extras

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExtrasIssue:
    """One problem in an extras value.

    ``index`` is the entry position, or None when the value as a whole is
    unusable.
    """

    index: int | None
    reason: str
    raw: Any = None

    def __str__(self) -> str:
        where = "extras" if self.index is None else f"entry #{self.index}"
        return f"{where}: {self.reason}"


def validate_extras(raw: Any, *, resource_id: str | None = None) -> list[ExtrasIssue]:
    """Every reason match() would ignore part or all of ``raw``.

    None and empty lists are valid: they simply mean no extra secrets.
    """
    issues: list[ExtrasIssue] = []

    if raw is None:
        return issues
    if not is_list_shaped(raw):
        issues.append(
            ExtrasIssue(None, f"expected a list, got {type(raw).__name__}", raw)
        )
    else:
        for index, secret in enumerate(parse_extras(raw)):
            if isinstance(secret, InvalidSecret):
                issues.append(ExtrasIssue(index, secret.reason, secret.raw))

    for issue in issues:
        # str(issue) carries position and reason only, never the entry itself
        logger.warning("resource %s: %s", resource_id or "<unknown>", issue)
    return issues
