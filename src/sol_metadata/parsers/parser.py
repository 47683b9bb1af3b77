"""Base class for streaming XML parsers.

Streaming parsers are lxml parser targets: lxml tokenizes the document and
calls ``start``, ``end``, ``data`` and ``close`` on the target instead of
building an element tree. Subclasses implement those callbacks and return
their result from ``close``.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any

from lxml import etree

logger = logging.getLogger(__name__)

Source = str | Path | IO[bytes]


class StreamingParser(ABC):
    """Abstract lxml parser target with dict-based tokenizer configuration.

    Config keys:
        resolve_entities: Substitute entities declared in a DTD (default: False)
        no_network: Forbid network access while loading (default: True)
        huge_tree: Lift libxml2's tree depth and text size limits (default: False)
    """

    def __init__(self, config: dict | None = None):
        self._config = config or {}

    @property
    def resolve_entities(self) -> bool:
        return bool(self._config.get("resolve_entities", False))

    @property
    def no_network(self) -> bool:
        return bool(self._config.get("no_network", True))

    @property
    def huge_tree(self) -> bool:
        return bool(self._config.get("huge_tree", False))

    def _make_parser(self) -> etree.XMLParser:
        """Create a non-recovering lxml parser that reports to this target."""
        return etree.XMLParser(
            target=self,
            recover=False,
            resolve_entities=self.resolve_entities,
            no_network=self.no_network,
            huge_tree=self.huge_tree,
        )

    def parse(self, source: Source) -> Any:
        """Stream a document from a path or binary file object.

        Args:
            source: Filesystem path or binary file object

        Returns:
            Whatever the target's ``close`` returns

        Raises:
            OSError: If the source cannot be opened or read
            lxml.etree.XMLSyntaxError: If the document is not well-formed
        """
        self.reset()
        if isinstance(source, Path):
            source = str(source)
        logger.debug(f"Streaming parse of {source}")
        etree.parse(source, self._make_parser())
        return self.result()

    def parse_string(self, text: str | bytes) -> Any:
        """Stream a document held in memory.

        Args:
            text: Document content

        Returns:
            Whatever the target's ``close`` returns

        Raises:
            lxml.etree.XMLSyntaxError: If the document is not well-formed
        """
        self.reset()
        etree.fromstring(text, self._make_parser())
        return self.result()

    @abstractmethod
    def reset(self) -> None:
        """Discard all state from a previous parse."""
        pass

    @abstractmethod
    def result(self) -> Any:
        """Return the result of the most recent parse."""
        pass

    @abstractmethod
    def start(self, tag: str, attrib: dict) -> None:
        pass

    @abstractmethod
    def end(self, tag: str) -> None:
        pass

    @abstractmethod
    def data(self, text: str) -> None:
        pass

    def close(self) -> Any:
        return self.result()
