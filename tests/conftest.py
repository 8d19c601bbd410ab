"""Shared fixtures and conformance fixture loader for multipass.

Matcher conformance cases live in tests/fixtures/*.yaml. Each document
names a resource (primary secret + raw extras) and a list of cases; a case
lists the plaintexts the fake verifier accepts and the expected match.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
import yaml

from multipass import PortableHashVerifier, Resource

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"
PROOF = "$P$Bopaque-proof-token"


@dataclass
class RecordingVerifier:
    """Verifier that accepts a fixed set of plaintexts and records each call."""

    accepted: frozenset[str] = frozenset()
    calls: list[tuple[str, str]] = field(default_factory=list)

    def verify(self, candidate: str, proof: str, /) -> bool:
        self.calls.append((candidate, proof))
        return candidate in self.accepted

    @property
    def candidates(self) -> list[str]:
        return [c for c, _ in self.calls]


@dataclass
class ConformanceCase:
    """A single case from a matcher conformance fixture."""

    fixture_name: str
    case_name: str
    resource: Resource
    accepted: frozenset[str]
    expect: str | None
    expect_calls: list[str] | None


def load_conformance_cases() -> list[ConformanceCase]:
    cases: list[ConformanceCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("matcher_*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[ConformanceCase]:
    """Load one fixture file (may contain multiple documents)."""
    cases: list[ConformanceCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            resource = _parse_resource(doc)
            for case in doc["cases"]:
                cases.append(
                    ConformanceCase(
                        fixture_name=doc["name"],
                        case_name=case["name"],
                        resource=resource,
                        accepted=frozenset(case.get("accepts", [])),
                        expect=case["expect"],
                        expect_calls=case.get("calls"),
                    )
                )
    return cases


def _parse_resource(doc: dict[str, Any]) -> Resource:
    return Resource(
        id=doc["name"],
        primary_secret=doc.get("primary"),
        extras=doc.get("extras"),
    )


@pytest.fixture
def proof() -> str:
    return PROOF


@pytest.fixture(scope="session")
def hasher() -> PortableHashVerifier:
    return PortableHashVerifier()


@pytest.fixture
def store_yaml(tmp_path: Path) -> Path:
    path = tmp_path / "store.yaml"
    path.write_text(
        """\
resources:
  - id: members
    password: front-door
    fields:
      _extra_passwords:
        - password: partner-door
          label: Partners
        - "  staff-door  "
        - ""
        - {foo: bar}
  - id: public
    fields:
      _extra_passwords: [ignored]
  - id: single
    password: only-door
"""
    )
    return path
