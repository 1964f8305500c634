"""pkgmeta: package metadata for generated API client libraries.

Merges three configuration sources into one immutable record:
- Dependency table (version bounds of shared libraries and proto packages)
- API defaults (author, license, default release level and version)
- Packaging config (names and paths for a single API)

Public API:
    aggregate: Build PackageMetadata from the three configs
    PackageMetadata: The aggregated, immutable record
    DependenciesConfig, ApiDefaultsConfig, PackagingConfig: Input configs
    VersionBound: Lower/upper version range
    bound_specifier, bound_allows, requirement_string: PEP 440 helpers for bounds
    TargetLanguage, ReleaseLevel, ArtifactType: Enumerations
    PackageMetadataError, UnknownProtoDependencyError: Exception types
"""

from .aggregate import aggregate, resolve_proto_package_dependencies
from .configs import ApiDefaultsConfig, DependenciesConfig, PackagingConfig
from .defaults import build_map_with_default, fill_defaults
from .exceptions import PackageMetadataError, UnknownProtoDependencyError
from .metadata import PackageMetadata
from .models import ArtifactType, ProtoPackageVersion, ReleaseLevel, TargetLanguage, VersionBound
from .versions import bound_allows, bound_specifier, requirement_string

__version__ = "0.1.0"

__all__ = [
    "aggregate",
    "resolve_proto_package_dependencies",
    "build_map_with_default",
    "fill_defaults",
    "bound_specifier",
    "bound_allows",
    "requirement_string",
    "PackageMetadata",
    "DependenciesConfig",
    "ApiDefaultsConfig",
    "PackagingConfig",
    "VersionBound",
    "ProtoPackageVersion",
    "TargetLanguage",
    "ReleaseLevel",
    "ArtifactType",
    "PackageMetadataError",
    "UnknownProtoDependencyError",
]
