"""PEP 440 helpers for version bounds.

Manifest rendering for Python targets needs bounds as requirement strings
and specifier sets. Bounds from the dependency table use PEP 440 spellings
such as "0.15dev", which packaging normalizes to "0.15.dev0".
"""

from __future__ import annotations

from packaging.specifiers import SpecifierSet
from packaging.version import Version

from .models import VersionBound


def _specifier_parts(bound: VersionBound) -> list[str]:
    parts: list[str] = []
    if bound.lower is not None:
        parts.append(f">={bound.lower}")
    if bound.upper is not None:
        parts.append(f"<{bound.upper}")
    return parts


def bound_specifier(bound: VersionBound) -> SpecifierSet:
    """Convert a bound to a SpecifierSet.

    Examples:
        (1.0.0, 2.0.0) → SpecifierSet(">=1.0.0,<2.0.0")
        (None, None) → SpecifierSet("")

    Raises:
        packaging.specifiers.InvalidSpecifier: If either side is not a
            valid PEP 440 version.
    """
    return SpecifierSet(",".join(_specifier_parts(bound)))


def bound_allows(bound: VersionBound, version: str) -> bool:
    """Check whether a version lies within a bound, prereleases included."""
    return bound_specifier(bound).contains(Version(version), prereleases=True)


def requirement_string(name: str, bound: VersionBound) -> str:
    """Render a dependency line for setup.py style manifests.

    Examples:
        ("google-gax", (0.14.0, 0.15dev)) → "google-gax>=0.14.0, <0.15dev"
        ("grpcio", (1.0.0, None)) → "grpcio>=1.0.0"
        ("protobuf", (None, None)) → "protobuf"
    """
    if bound.is_unbounded:
        return name
    bound_specifier(bound)  # raises on invalid versions
    return name + ", ".join(_specifier_parts(bound))
