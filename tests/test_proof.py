"""Tests for proof token extraction and the portable-hash verifier."""

from __future__ import annotations

import hashlib

import pytest

from multipass import (
    PORTABLE_HASH_PREFIX,
    PortableHashVerifier,
    Verifier,
    cookie_hash_for,
    cookie_name,
    extract_proof,
    unslash,
)


class TestCookieName:
    def test_cookie_hash_is_md5_of_site_url(self) -> None:
        url = "https://example.com"
        assert cookie_hash_for(url) == hashlib.md5(url.encode()).hexdigest()

    def test_cookie_name(self) -> None:
        assert cookie_name("abc") == "wp-postpass_abc"


class TestUnslash:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("plain", "plain"),
            (r"a\$b", "a$b"),
            ("a\\\\b", "a\\b"),
            ("trailing\\", "trailing"),
            (r"\'quoted\'", "'quoted'"),
        ],
    )
    def test_unslash(self, raw: str, expected: str) -> None:
        assert unslash(raw) == expected


class TestExtractProof:
    def test_missing_cookie(self) -> None:
        assert extract_proof({}, "h") is None

    def test_other_site_cookie_ignored(self) -> None:
        assert extract_proof({"wp-postpass_other": "$P$Bxyz"}, "h") is None

    def test_prefixed_value(self) -> None:
        assert extract_proof({"wp-postpass_h": "$P$Bxyz"}, "h") == "$P$Bxyz"

    def test_value_is_unslashed(self) -> None:
        assert extract_proof({"wp-postpass_h": r"$P$Bx\/y"}, "h") == "$P$Bx/y"

    @pytest.mark.parametrize("value", ["", "$P$Dxyz", "$2y$10$abc", "plain-text"])
    def test_unrecognized_prefix_rejected(self, value: str) -> None:
        assert extract_proof({"wp-postpass_h": value}, "h") is None


class TestPortableHashVerifier:
    def test_hash_has_portable_prefix(self, hasher: PortableHashVerifier) -> None:
        assert hasher.hash("secret").startswith(PORTABLE_HASH_PREFIX)

    def test_hash_is_salted(self, hasher: PortableHashVerifier) -> None:
        assert hasher.hash("secret") != hasher.hash("secret")

    def test_verify_roundtrip(self, hasher: PortableHashVerifier) -> None:
        token = hasher.hash("partner-door")
        assert hasher.verify("partner-door", token) is True
        assert hasher.verify("front-door", token) is False

    def test_verify_known_wordpress_hash(self, hasher: PortableHashVerifier) -> None:
        # phpass portable hash of "test12345" from the phpass test suite
        token = "$P$9IQRaTwmfeRo7ud9Fh4E2PdI0S3r.L0"
        assert hasher.verify("test12345", token) is True
        assert hasher.verify("test12346", token) is False

    @pytest.mark.parametrize("token", ["", "$P$B", "not-a-hash", "$P$Bshort"])
    def test_malformed_proof_is_false(self, hasher: PortableHashVerifier, token: str) -> None:
        assert hasher.verify("anything", token) is False

    def test_satisfies_protocol(self, hasher: PortableHashVerifier) -> None:
        assert isinstance(hasher, Verifier)
