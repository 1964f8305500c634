"""Tests for pkgmeta.versions."""

from __future__ import annotations

import pytest
from packaging.specifiers import InvalidSpecifier, SpecifierSet

from pkgmeta.models import VersionBound
from pkgmeta.versions import bound_allows, bound_specifier, requirement_string


class TestBoundSpecifier:
    def test_both_sides(self) -> None:
        assert bound_specifier(VersionBound.create("1.0.0", "2.0.0")) == SpecifierSet(">=1.0.0,<2.0.0")

    def test_lower_only(self) -> None:
        assert bound_specifier(VersionBound.create("1.0.0", None)) == SpecifierSet(">=1.0.0")

    def test_unbounded(self) -> None:
        assert bound_specifier(VersionBound()) == SpecifierSet("")

    def test_invalid_version(self) -> None:
        with pytest.raises(InvalidSpecifier):
            bound_specifier(VersionBound.create("not a version", None))


class TestBoundAllows:
    def test_inside(self) -> None:
        assert bound_allows(VersionBound.create("1.0.0", "2.0.0"), "1.5.0")

    def test_lower_inclusive(self) -> None:
        assert bound_allows(VersionBound.create("1.0.0", "2.0.0"), "1.0.0")

    def test_upper_exclusive(self) -> None:
        assert not bound_allows(VersionBound.create("1.0.0", "2.0.0"), "2.0.0")

    def test_below(self) -> None:
        assert not bound_allows(VersionBound.create("1.0.0", "2.0.0"), "0.9")

    def test_dev_upper(self) -> None:
        bound = VersionBound.create("0.14.0", "0.15dev")
        assert bound_allows(bound, "0.14.9")
        assert not bound_allows(bound, "0.15.0")

    def test_unbounded_allows_anything(self) -> None:
        assert bound_allows(VersionBound(), "42.0")


class TestRequirementString:
    def test_both_sides(self) -> None:
        bound = VersionBound.create("0.14.0", "0.15dev")
        assert requirement_string("google-gax", bound) == "google-gax>=0.14.0, <0.15dev"

    def test_lower_only(self) -> None:
        assert requirement_string("grpcio", VersionBound.create("1.0.0", None)) == "grpcio>=1.0.0"

    def test_upper_only(self) -> None:
        assert requirement_string("protobuf", VersionBound.create(None, "4.0")) == "protobuf<4.0"

    def test_unbounded(self) -> None:
        assert requirement_string("protobuf", VersionBound()) == "protobuf"


class TestPublicApi:
    def test_helpers_exported(self) -> None:
        import pkgmeta

        bound = pkgmeta.VersionBound.create("1.0.0", None)
        assert pkgmeta.requirement_string("grpcio", bound) == "grpcio>=1.0.0"
        assert pkgmeta.bound_allows(bound, "1.2.0")
        assert pkgmeta.bound_specifier(bound) == SpecifierSet(">=1.0.0")
        assert {"bound_specifier", "bound_allows", "requirement_string"} <= set(pkgmeta.__all__)
