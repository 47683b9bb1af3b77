"""Streaming extractor for PISI/SOL metadata.xml documents.

Only two values are extracted:

- the package name, from ``<Name>`` directly inside ``<Package>``
- the component, from ``<PartOf>`` at any depth under the root

Which field receives a run of character data is decided purely from the
tracker's active-state set when the text arrives.
"""

import logging

from schemas.package_metadata import PackageMetadata

from .parser import StreamingParser
from .tracker import ParseFlag, TagTracker

logger = logging.getLogger(__name__)

# Package name requires exactly these flags and nothing else.
PACKAGE_NAME_FLAGS = ParseFlag.ROOT | ParseFlag.PACKAGE | ParseFlag.NAME


class MetadataParser(StreamingParser):
    """Extract the package name and component from metadata.xml.

    The MetadataParser:
    1. Forwards every opening and closing tag to a TagTracker
    2. On character data, matches the active-state set exactly against
       Root+Package+Name for the package name
    3. Otherwise captures the text as the component when PartOf is open
    4. Returns a PackageMetadata snapshot when the tokenizer finishes
    """

    def __init__(self, config: dict | None = None):
        super().__init__(config)
        self.tracker = TagTracker()
        self._result = PackageMetadata()

    def reset(self) -> None:
        self.tracker.reset()
        self._result = PackageMetadata()

    def result(self) -> PackageMetadata:
        return self._result

    def start(self, tag: str, attrib: dict) -> None:
        self.tracker.on_tag_event(tag)

    def end(self, tag: str) -> None:
        self.tracker.on_tag_event(tag)

    def data(self, text: str) -> None:
        """Route character data to the field selected by the active flags.

        A later match replaces an earlier one rather than appending to it,
        so text split by an entity reference keeps only its last chunk.

        Args:
            text: Character data reported by the tokenizer
        """
        flags = self.tracker.flags
        if flags == PACKAGE_NAME_FLAGS:
            self._result.package_name = text
            return
        if ParseFlag.COMPONENT in flags:
            self._result.component = text
