"""ResourceStore: in-memory stand-in for the host's post storage."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class ResourceRecord:
    """A stored resource: its primary password plus free-form fields.

    ``fields`` carries admin-configured values such as the extras list,
    exactly as the host stored them.
    """

    id: str
    password: str | None = None
    fields: MappingProxyType[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )


class ResourceStore:
    """Lookup of ResourceRecords by id. Read-only once built."""

    def __init__(self, records: Iterable[ResourceRecord] = ()) -> None:
        self._records: dict[str, ResourceRecord] = {r.id: r for r in records}

    def get(self, resource_id: str) -> ResourceRecord | None:
        return self._records.get(resource_id)

    def ids(self) -> list[str]:
        return list(self._records)

    def __iter__(self) -> Iterator[ResourceRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._records
