"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pkgmeta.configs import ApiDefaultsConfig, DependenciesConfig, PackagingConfig


@pytest.fixture
def dependencies() -> DependenciesConfig:
    """A dependency table in the shape the config documents use."""
    return DependenciesConfig.model_validate(
        {
            "gax_version_bounds": {
                "python": {"lower": "0.15.7", "upper": "0.16dev"},
                "java": {"lower": "1.4.0"},
            },
            "gax_grpc_version_bounds": {"java": {"lower": "0.20.0"}},
            "gax_http_version_bounds": {},
            "grpc_version_bounds": {"python": {"lower": "1.0.0", "upper": "2.0dev"}},
            "proto_version_bounds": {"python": {"lower": "3.0.0"}},
            "api_common_version_bounds": {"java": {"lower": "1.1.0"}},
            "auth_version_bounds": {"nodejs": {"lower": "0.9.0", "upper": "1.0.0"}},
            "proto_packages": {
                "google-common-protos": {
                    "default": {"lower": "1.5.2", "upper": "2.0dev"},
                    "java": {"lower": "0.1.0", "name_override": "proto-google-common-protos"},
                    "go": None,
                },
                "google-iam-v1": {
                    "python": {
                        "lower": "0.11.1",
                        "upper": "0.12dev",
                        "name_override": "grpc-google-iam-v1",
                    },
                },
            },
        }
    )


@pytest.fixture
def api_defaults() -> ApiDefaultsConfig:
    return ApiDefaultsConfig.model_validate(
        {
            "author": "Google Inc",
            "email": "googleapis-packages@google.com",
            "homepage": "https://github.com/googleapis/googleapis",
            "license_name": "Apache-2.0",
            "release_level": "alpha",
            "generated_non_ga_package_version_bounds": {
                "python": {"lower": "0.14.0", "upper": "0.15dev"},
                "java": {"lower": "0.1.0"},
            },
        }
    )


@pytest.fixture
def packaging() -> PackagingConfig:
    return PackagingConfig.model_validate(
        {
            "package_name": "google-cloud-logging",
            "api_name": "logging",
            "api_version": "v2",
            "proto_path": "google/logging/v2",
            "artifact_type": "gapic",
            "proto_package_dependencies": ["google-common-protos"],
            "proto_package_test_dependencies": ["google-iam-v1"],
        }
    )
