"""ExtrasProvider strategies.

The default source reads an admin-configured field from the stored record.
Overrides are composed explicitly with FilteredExtrasProvider instead of
being registered globally::

    provider = FilteredExtrasProvider(
        FieldExtrasProvider(),
        filters=(add_seasonal_password,),
    )

Filters run in order, once per call, after the default source is read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from multipass._store import ResourceRecord
    from multipass._types import ExtrasFilter, ExtrasProvider, RawExtras

DEFAULT_EXTRAS_FIELD = "_extra_passwords"


@dataclass(frozen=True, slots=True)
class FieldExtrasProvider:
    """Read extras from a named field of the record.

    A missing or null field yields an empty tuple.
    """

    field_name: str = DEFAULT_EXTRAS_FIELD

    def extras(self, record: ResourceRecord, /) -> RawExtras:
        value = record.fields.get(self.field_name)
        if value is None:
            return ()
        return value


@dataclass(frozen=True, slots=True)
class StaticExtrasProvider:
    """The same extras for every record."""

    values: RawExtras = ()

    def extras(self, record: ResourceRecord, /) -> RawExtras:
        return self.values


@dataclass(frozen=True, slots=True)
class FilteredExtrasProvider:
    """Apply filters on top of a base provider.

    Each filter receives the current extras and the record and returns the
    extras to pass on. A filter may replace the value outright.
    """

    base: ExtrasProvider
    filters: tuple[ExtrasFilter, ...] = ()

    def extras(self, record: ResourceRecord, /) -> RawExtras:
        value = self.base.extras(record)
        for f in self.filters:
            value = f(value, record)
        return value
