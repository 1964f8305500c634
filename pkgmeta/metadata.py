"""The aggregated package metadata record."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, TypeAdapter

from .models import ArtifactType, ReleaseLevel, TargetLanguage, VersionBound


def _freeze(value: dict) -> Mapping:
    return MappingProxyType(value)


def _hashable(value: Any) -> Any:
    if isinstance(value, Mapping):
        return frozenset((key, _hashable(item)) for key, item in value.items())
    return value


# Validated maps are stored as read-only views
LanguageBounds = Annotated[dict[TargetLanguage, VersionBound], AfterValidator(_freeze)]
PackageBounds = Annotated[dict[str, VersionBound], AfterValidator(_freeze)]
LanguageDependencies = Annotated[dict[TargetLanguage, PackageBounds], AfterValidator(_freeze)]

_optional_language_bounds = TypeAdapter(LanguageBounds | None)


class PackageMetadata(BaseModel):
    """Package metadata for a generated API client library.

    Immutable once built: fields cannot be reassigned and every map is a
    read-only view. Per-language maps hold only the languages that have a
    value configured; the accessor methods return None for the rest.

    Attributes:
        short_name: Single-word short name of the API, e.g. "logging".
        api_version: Major version of the API, e.g. "v1".
        proto_path: Path to the API protos in the googleapis repo.
        gapic_config_name: File name of the GAPIC API config yaml.
        generated_ga_package_version_bounds: Package version used once the
            release level is GA. None when no GA version is configured.
        proto_package_test_dependencies: None when absent, which is distinct
            from an empty map.
    """

    model_config = ConfigDict(frozen=True)

    package_name: str
    short_name: str
    api_version: str
    proto_path: str
    author: str
    email: str
    homepage: str
    license_name: str
    gapic_config_name: str | None = None
    release_level: ReleaseLevel
    artifact_type: ArtifactType | None = None

    gax_version_bounds: LanguageBounds
    gax_grpc_version_bounds: LanguageBounds
    gax_http_version_bounds: LanguageBounds
    grpc_version_bounds: LanguageBounds
    proto_version_bounds: LanguageBounds
    api_common_version_bounds: LanguageBounds
    auth_version_bounds: LanguageBounds
    generated_non_ga_package_version_bounds: LanguageBounds
    generated_ga_package_version_bounds: LanguageBounds | None = None

    proto_package_dependencies: LanguageDependencies
    proto_package_test_dependencies: LanguageDependencies | None = None

    def gax_version_bound(self, language: TargetLanguage) -> VersionBound | None:
        """The version of GAX this package depends on."""
        return self.gax_version_bounds.get(language)

    def gax_grpc_version_bound(self, language: TargetLanguage) -> VersionBound | None:
        return self.gax_grpc_version_bounds.get(language)

    def gax_http_version_bound(self, language: TargetLanguage) -> VersionBound | None:
        return self.gax_http_version_bounds.get(language)

    def grpc_version_bound(self, language: TargetLanguage) -> VersionBound | None:
        """The version of gRPC this package depends on."""
        return self.grpc_version_bounds.get(language)

    def proto_version_bound(self, language: TargetLanguage) -> VersionBound | None:
        """The version of the protocol buffer runtime this package depends on."""
        return self.proto_version_bounds.get(language)

    def api_common_version_bound(self, language: TargetLanguage) -> VersionBound | None:
        """The version of api-common this package depends on. Only Java sets it."""
        return self.api_common_version_bounds.get(language)

    def auth_version_bound(self, language: TargetLanguage) -> VersionBound | None:
        return self.auth_version_bounds.get(language)

    def generated_package_version_bound(self, language: TargetLanguage) -> VersionBound:
        """The version of the generated package itself, e.g. "0.14.0".

        GA packages use the GA bound when one is configured for the
        language. Everything else falls back to the non-GA bound, since not
        every language configures a GA version.

        Raises:
            KeyError: If the non-GA map has no entry for the language.
        """
        if (
            self.release_level == ReleaseLevel.GA
            and self.generated_ga_package_version_bounds is not None
            and language in self.generated_ga_package_version_bounds
        ):
            return self.generated_ga_package_version_bounds[language]
        return self.generated_non_ga_package_version_bounds[language]

    def proto_package_dependencies_for(self, language: TargetLanguage) -> dict[str, VersionBound] | None:
        """Proto package name → version bound for one language."""
        deps = self.proto_package_dependencies.get(language)
        return dict(deps) if deps is not None else None

    def proto_package_test_dependencies_for(
        self, language: TargetLanguage
    ) -> dict[str, VersionBound] | None:
        """Like proto_package_dependencies_for, but for test-only dependencies."""
        if self.proto_package_test_dependencies is None:
            return None
        deps = self.proto_package_test_dependencies.get(language)
        return dict(deps) if deps is not None else None

    def __hash__(self) -> int:
        return hash(tuple(_hashable(value) for value in self.__dict__.values()))

    def with_ga_package_version_bounds(
        self, bounds: Mapping[TargetLanguage, VersionBound] | None
    ) -> PackageMetadata:
        """Return a copy of this record with the GA package version bounds replaced.

        Raises:
            pydantic.ValidationError: If bounds has keys or values that are
                not a TargetLanguage and a VersionBound.
        """
        validated = _optional_language_bounds.validate_python(
            dict(bounds) if bounds is not None else None
        )
        return self.model_copy(update={"generated_ga_package_version_bounds": validated})

    @classmethod
    def create_dummy(cls) -> PackageMetadata:
        """Create a record with no content, for tests and placeholders."""
        return cls(
            package_name="",
            short_name="",
            api_version="",
            proto_path="",
            author="",
            email="",
            homepage="",
            license_name="",
            gapic_config_name="",
            release_level=ReleaseLevel.ALPHA,
            artifact_type=ArtifactType.GRPC,
            gax_version_bounds={},
            gax_grpc_version_bounds={},
            gax_http_version_bounds={},
            grpc_version_bounds={},
            proto_version_bounds={},
            api_common_version_bounds={},
            auth_version_bounds={},
            generated_non_ga_package_version_bounds={},
            generated_ga_package_version_bounds={},
            proto_package_dependencies={},
        )
