"""Shared metadata records."""

from .exceptions import MetadataError, MetadataReleasedError
from .metadata import Metadata, load_metadata

__all__ = [
    "Metadata",
    "load_metadata",
    "MetadataError",
    "MetadataReleasedError",
]
