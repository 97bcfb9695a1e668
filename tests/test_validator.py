"""Tests for proxymap.mapping.validator: domain shape and submission checks."""

from __future__ import annotations

import pytest

from proxymap.exceptions import (
    DuplicateSourceError,
    MalformedProxyError,
    MalformedSourceError,
    MappingValidationError,
    MissingInputError,
)
from proxymap.mapping.validator import DomainMapping, is_valid_domain, validate_mapping


# ── is_valid_domain ─────────────────────────────────────────────────


class TestIsValidDomain:
    @pytest.mark.parametrize(
        "name",
        [
            "claude.ai",
            "claude.hubp.de",
            "localhost",
            "a",
            "xn--bcher-kva.example",
            "Mixed-Case.Example.COM",
            "123.456",
            "a-b.c-d.e",
            "a" * 63 + ".com",
        ],
    )
    def test_accepts_host_names(self, name: str) -> None:
        assert is_valid_domain(name)

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "bad_domain!",
            "-leading.com",
            "trailing-.com",
            "double..dot",
            ".leading.dot",
            "trailing.dot.",
            "sp ace.com",
            "a" * 64 + ".com",
            "claude.ai\n",
            "https://claude.ai",
        ],
    )
    def test_rejects_malformed_names(self, name: str) -> None:
        assert not is_valid_domain(name)

    def test_no_overall_length_cap(self) -> None:
        name = ".".join(["label"] * 100)
        assert len(name) > 253
        assert is_valid_domain(name)


# ── validate_mapping ────────────────────────────────────────────────


class TestValidateMapping:
    def test_returns_trimmed_mapping(self) -> None:
        mapping = validate_mapping("  claude.ai ", "\tclaude.hubp.de\n")
        assert mapping == DomainMapping(source="claude.ai", proxy="claude.hubp.de")

    @pytest.mark.parametrize("source, proxy", [("", "x.com"), ("a.com", ""), ("   ", "x.com"), (None, "x.com")])
    def test_missing_input(self, source, proxy) -> None:
        with pytest.raises(MissingInputError):
            validate_mapping(source, proxy)

    def test_malformed_source(self) -> None:
        with pytest.raises(MalformedSourceError) as excinfo:
            validate_mapping("bad_domain!", "x.com")
        assert excinfo.value.domain == "bad_domain!"

    def test_malformed_proxy(self) -> None:
        with pytest.raises(MalformedProxyError) as excinfo:
            validate_mapping("a.com", "bad_proxy!")
        assert excinfo.value.domain == "bad_proxy!"

    def test_source_checked_before_proxy(self) -> None:
        with pytest.raises(MalformedSourceError):
            validate_mapping("bad!", "also bad!")

    def test_duplicate_source(self) -> None:
        with pytest.raises(DuplicateSourceError):
            validate_mapping("a.com", "y.com", existing_sources=["a.com"])

    def test_malformed_reported_before_duplicate(self) -> None:
        with pytest.raises(MalformedProxyError):
            validate_mapping("a.com", "bad!", existing_sources=["a.com"])

    def test_all_errors_share_base_class(self) -> None:
        for cls in (MissingInputError, MalformedSourceError, MalformedProxyError, DuplicateSourceError):
            assert issubclass(cls, MappingValidationError)


class TestDomainMapping:
    def test_is_immutable(self) -> None:
        mapping = DomainMapping("a.com", "x.com")
        with pytest.raises(AttributeError):
            mapping.source = "b.com"  # type: ignore[misc]

    def test_str_shows_direction(self) -> None:
        assert str(DomainMapping("a.com", "x.com")) == "a.com → x.com"
