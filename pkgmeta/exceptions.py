"""Exceptions for pkgmeta."""

from __future__ import annotations


class PackageMetadataError(Exception):
    """Base exception for package metadata errors."""

    pass


class UnknownProtoDependencyError(PackageMetadataError, ValueError):
    """A packaging config references a proto package the dependency table lacks."""

    def __init__(self, package_name: str):
        self.package_name = package_name
        super().__init__(f"'{package_name}' in proto_deps was not found in dependency list.")
