"""Data models for pkgmeta.

These enums and Pydantic models are the building blocks shared by the input
configs and the aggregated package metadata.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class TargetLanguage(Enum):
    """Output language of a generated client library.

    Values are the lowercase keys used in configuration documents.
    """

    JAVA = "java"
    CSHARP = "csharp"
    NODEJS = "nodejs"
    PYTHON = "python"
    GO = "go"
    PHP = "php"
    RUBY = "ruby"

    @classmethod
    def from_string(cls, value: str) -> TargetLanguage:
        """Parse a language key, ignoring case.

        Raises:
            ValueError: If the key names no known language.
        """
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown target language: {value!r}") from None


class ReleaseLevel(Enum):
    """Maturity stage of a generated package."""

    UNSET_RELEASE_LEVEL = "unset_release_level"
    ALPHA = "alpha"
    BETA = "beta"
    GA = "ga"
    DEPRECATED = "deprecated"


class ArtifactType(Enum):
    """Kind of artifact a packaging run generates."""

    GAPIC = "gapic"
    GRPC = "grpc"
    GRPC_COMMON = "grpc_common"
    PROTOBUF = "protobuf"
    GAPIC_CONFIG = "gapic_config"


class VersionBound(BaseModel):
    """A version range for a dependency.

    The lower bound is inclusive and the upper bound exclusive. Either side
    may be None, meaning the range is open on that side.

    Attributes:
        lower: Minimum allowed version, e.g. "0.14.0".
        upper: First disallowed version, e.g. "0.15dev".
    """

    model_config = ConfigDict(frozen=True)

    lower: str | None = None
    upper: str | None = None

    @field_validator("lower", "upper", mode="before")
    @classmethod
    def empty_is_unbounded(cls, value: object) -> object:
        return None if value == "" else value

    @classmethod
    def create(cls, lower: str | None, upper: str | None) -> VersionBound:
        """Build a bound. Empty strings mean unbounded, as in config documents."""
        return cls(lower=lower, upper=upper)

    @property
    def is_unbounded(self) -> bool:
        return self.lower is None and self.upper is None


class ProtoPackageVersion(BaseModel):
    """Per-language entry for a proto package in the dependency table.

    Attributes:
        lower: Inclusive lower version, if any.
        upper: Exclusive upper version, if any.
        name_override: Package name to use for this language instead of
                       the name the dependency table lists it under.
    """

    model_config = ConfigDict(frozen=True)

    lower: str | None = None
    upper: str | None = None
    name_override: str | None = None
