"""Input configuration models.

Each model mirrors one already-parsed configuration document. Build them
directly or with ``Model.model_validate(document)``; reading the documents
from disk is left to the caller.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .models import ArtifactType, ProtoPackageVersion, ReleaseLevel, TargetLanguage, VersionBound


class DependenciesConfig(BaseModel):
    """Dependency table shared by all generated packages.

    Attributes:
        gax_version_bounds: GAX version per language. The other
            ``*_version_bounds`` fields follow the same shape.
        proto_packages: Proto package name → language key (or "default")
            → version entry. A None entry opts that language out.
    """

    gax_version_bounds: dict[TargetLanguage, VersionBound] = Field(default_factory=dict)
    gax_grpc_version_bounds: dict[TargetLanguage, VersionBound] = Field(default_factory=dict)
    gax_http_version_bounds: dict[TargetLanguage, VersionBound] = Field(default_factory=dict)
    grpc_version_bounds: dict[TargetLanguage, VersionBound] = Field(default_factory=dict)
    proto_version_bounds: dict[TargetLanguage, VersionBound] = Field(default_factory=dict)
    api_common_version_bounds: dict[TargetLanguage, VersionBound] = Field(default_factory=dict)
    auth_version_bounds: dict[TargetLanguage, VersionBound] = Field(default_factory=dict)
    proto_packages: dict[str, dict[str, ProtoPackageVersion | None]] = Field(default_factory=dict)

    def get_package_versions(self, package_name: str) -> dict[str, ProtoPackageVersion | None] | None:
        """Return the per-language entries for a proto package, or None if unlisted."""
        versions = self.proto_packages.get(package_name)
        if versions is None:
            return None
        return dict(versions)


class ApiDefaultsConfig(BaseModel):
    """Defaults that apply to every API unless its packaging config overrides them."""

    author: str
    email: str
    homepage: str
    license_name: str
    release_level: ReleaseLevel
    generated_non_ga_package_version_bounds: dict[TargetLanguage, VersionBound] = Field(
        default_factory=dict
    )


class PackagingConfig(BaseModel):
    """Packaging settings for a single API.

    Attributes:
        api_name: Single-word short name of the API, e.g. "logging".
        api_version: Major version used in the package name, e.g. "v1".
        proto_package_dependencies: Names of proto packages in the
            dependency table this package depends on.
        release_level: Overrides the API defaults when set.
    """

    package_name: str
    api_name: str
    api_version: str
    proto_path: str
    artifact_type: ArtifactType | None = None
    proto_package_dependencies: list[str] | None = None
    proto_package_test_dependencies: list[str] | None = None
    release_level: ReleaseLevel | None = None
