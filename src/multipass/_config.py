"""Store config parsing: YAML/dict -> ResourceStore.

Expected shape::

    resources:
      - id: members
        password: front-door
        fields:
          _extra_passwords:
            - password: partner-door
              label: Partners
            - staff-door

Only the document structure is checked here. Field contents (including the
extras list) are passed through untouched; see validate_extras() for
diagnosing them.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from multipass._store import ResourceRecord, ResourceStore


class ConfigParseError(Exception):
    """Error parsing a config document into a ResourceStore."""


def parse_store(data: dict[str, Any]) -> ResourceStore:
    """Parse a dict into a ResourceStore.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_resources = data.get("resources")
    if raw_resources is None:
        msg = "missing required field 'resources'"
        raise ConfigParseError(msg)
    if not isinstance(raw_resources, list):
        msg = f"'resources' must be a list, got {type(raw_resources).__name__}"
        raise ConfigParseError(msg)

    records: list[ResourceRecord] = []
    seen: set[str] = set()
    for position, raw in enumerate(raw_resources):
        record = _parse_record(raw, position)
        if record.id in seen:
            msg = f"duplicate resource id {record.id!r}"
            raise ConfigParseError(msg)
        seen.add(record.id)
        records.append(record)

    return ResourceStore(records)


def load_store(path: str | Path) -> ResourceStore:
    """Read and parse a YAML store file.

    An empty file is an empty store.

    Raises:
        ConfigParseError: If the YAML is invalid or the document malformed.
        OSError: If the file cannot be read.
    """
    with Path(path).open() as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"invalid YAML in {path}: {e}"
            raise ConfigParseError(msg) from e

    if data is None:
        return ResourceStore()
    return parse_store(data)


def _parse_record(data: Any, position: int) -> ResourceRecord:
    """Parse a single resource entry."""
    if not isinstance(data, dict):
        msg = f"resource #{position} must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    if "id" not in data:
        msg = f"resource #{position} missing required field 'id'"
        raise ConfigParseError(msg)
    resource_id = data["id"]
    # YAML happily turns `id: 42` into an int; ids are strings.
    if isinstance(resource_id, int) and not isinstance(resource_id, bool):
        resource_id = str(resource_id)
    if not isinstance(resource_id, str) or not resource_id:
        msg = f"resource #{position} 'id' must be a non-empty string, got {resource_id!r}"
        raise ConfigParseError(msg)

    password = data.get("password")
    if password is not None and not isinstance(password, str):
        msg = f"resource {resource_id!r} 'password' must be a string, got {type(password).__name__}"
        raise ConfigParseError(msg)

    fields = data.get("fields", {})
    if fields is None:
        fields = {}
    if not isinstance(fields, dict):
        msg = f"resource {resource_id!r} 'fields' must be a dict, got {type(fields).__name__}"
        raise ConfigParseError(msg)

    return ResourceRecord(
        id=resource_id,
        password=password,
        fields=MappingProxyType(dict(fields)),
    )
