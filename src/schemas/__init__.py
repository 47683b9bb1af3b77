"""Schema definitions for sol-metadata."""

from .package_metadata import PackageMetadata

__all__ = [
    "PackageMetadata",
]
