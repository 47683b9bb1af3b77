"""Streaming parsers for package metadata documents."""

from .metadata_parser import PACKAGE_NAME_FLAGS, MetadataParser
from .parser import StreamingParser
from .tracker import ROOT_TAGS, TAG_FLAGS, ParseFlag, TagTracker

__all__ = [
    "StreamingParser",
    "MetadataParser",
    "TagTracker",
    "ParseFlag",
    "ROOT_TAGS",
    "TAG_FLAGS",
    "PACKAGE_NAME_FLAGS",
]
