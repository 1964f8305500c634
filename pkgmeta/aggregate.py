"""Aggregation of the three input configs into PackageMetadata.

The record draws from three sources:
1. The dependency table: shared library version bounds per language
2. The API defaults: author, license, package version and release level
3. The packaging config: names and paths for this one API

Proto package dependencies need two of them at once: the packaging config
lists the package names, and the dependency table holds their versions.
"""

from __future__ import annotations

import logging

from .configs import ApiDefaultsConfig, DependenciesConfig, PackagingConfig
from .defaults import build_map_with_default
from .exceptions import UnknownProtoDependencyError
from .metadata import LanguageDependencies, PackageMetadata
from .models import VersionBound

logger = logging.getLogger(__name__)


def aggregate(
    api_defaults: ApiDefaultsConfig,
    dependencies: DependenciesConfig,
    packaging: PackagingConfig,
) -> PackageMetadata:
    """Build the package metadata for one API.

    The GA package version bounds and the GAPIC config name are left unset;
    callers that have them use PackageMetadata.with_ga_package_version_bounds.

    Args:
        api_defaults: Defaults shared by all APIs.
        dependencies: Dependency version table.
        packaging: Packaging settings for this API.

    Returns:
        A new PackageMetadata. Later changes to the inputs do not affect it.

    Raises:
        UnknownProtoDependencyError: If a proto dependency or proto test
            dependency is missing from the dependency table.
    """
    logger.debug(f"Aggregating package metadata for '{packaging.package_name}'")

    proto_package_dependencies = resolve_proto_package_dependencies(
        packaging.proto_package_dependencies, dependencies
    )
    proto_package_test_dependencies = resolve_proto_package_dependencies(
        packaging.proto_package_test_dependencies, dependencies
    )

    # First non-null wins
    release_level = packaging.release_level
    if release_level is None:
        release_level = api_defaults.release_level
    logger.debug(f"Release level for '{packaging.package_name}': {release_level.value}")

    return PackageMetadata(
        # dependency table
        gax_version_bounds=dependencies.gax_version_bounds,
        gax_grpc_version_bounds=dependencies.gax_grpc_version_bounds,
        gax_http_version_bounds=dependencies.gax_http_version_bounds,
        grpc_version_bounds=dependencies.grpc_version_bounds,
        proto_version_bounds=dependencies.proto_version_bounds,
        auth_version_bounds=dependencies.auth_version_bounds,
        api_common_version_bounds=dependencies.api_common_version_bounds,
        # api defaults
        generated_non_ga_package_version_bounds=api_defaults.generated_non_ga_package_version_bounds,
        author=api_defaults.author,
        email=api_defaults.email,
        homepage=api_defaults.homepage,
        license_name=api_defaults.license_name,
        # packaging
        package_name=packaging.package_name,
        short_name=packaging.api_name,
        artifact_type=packaging.artifact_type,
        api_version=packaging.api_version,
        proto_path=packaging.proto_path,
        # multiple sources
        proto_package_dependencies=proto_package_dependencies,
        proto_package_test_dependencies=proto_package_test_dependencies,
        release_level=release_level,
    )


def resolve_proto_package_dependencies(
    package_names: list[str] | None,
    dependencies: DependenciesConfig,
) -> LanguageDependencies:
    """Look up proto packages in the dependency table, per language.

    Each package's entries are filled with the table's "default" entry for
    languages it does not list. A language whose entry is None is skipped.
    The entry's name_override, when set, replaces the package name for that
    language. If the same final name appears twice for a language, the
    later package wins.

    Example:
        ["google-common-protos"] with python entry
        {lower: 1.0.0, upper: 2.0.0, name_override: google-cloud-common}
        → {PYTHON: {"google-cloud-common": VersionBound(1.0.0, 2.0.0)}}

    Args:
        package_names: Proto package names from the packaging config.
        dependencies: Dependency table to look them up in.

    Returns:
        Language → package name → version bound. Empty when package_names
        is None.

    Raises:
        UnknownProtoDependencyError: If a name is not in the table.
    """
    resolved: LanguageDependencies = {}
    if package_names is None:
        return resolved

    for package_name in package_names:
        config = dependencies.get_package_versions(package_name)
        if config is None:
            raise UnknownProtoDependencyError(package_name)

        for language, entry in build_map_with_default(config).items():
            if entry is None:
                logger.debug(f"'{package_name}' has no version configured for {language.value}, skipping")
                continue

            name = entry.name_override if entry.name_override is not None else package_name
            resolved.setdefault(language, {})[name] = VersionBound.create(entry.lower, entry.upper)

    return resolved
