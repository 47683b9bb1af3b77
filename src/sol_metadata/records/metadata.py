"""Reference-counted metadata record.

A Metadata record is filled by ``load`` and then shared between readers.
Reads never mutate the record, so any number of holders may read it once it
has been published. ``load`` itself is not synchronised: callers that reload
a shared record must serialise that themselves.
"""

import logging
import threading

from lxml import etree

from schemas.package_metadata import PackageMetadata
from sol_metadata.parsers import MetadataParser
from sol_metadata.parsers.parser import Source

from .exceptions import MetadataReleasedError


class Metadata:
    """Package name and component extracted from a metadata.xml document.

    A new record holds one reference and has both fields unset. ``ref``
    and ``unref`` manage shared ownership; once the last reference is
    released the record is cleared and can no longer be used.

    Example:
        metadata = Metadata()
        if metadata.load("metadata.xml"):
            print(metadata.package_name, metadata.component)
        metadata.unref()
    """

    def __init__(self, config: dict | None = None, logger: logging.Logger | None = None):
        """Initialize an empty record.

        Args:
            config: Tokenizer configuration passed to MetadataParser
            logger: Destination for load diagnostics (default: module logger)
        """
        self._config = config or {}
        self._logger = logger or logging.getLogger(__name__)
        self._package_name: str | None = None
        self._component: str | None = None
        self._refcount = 1
        self._lock = threading.Lock()

    @property
    def released(self) -> bool:
        return self._refcount == 0

    @property
    def refcount(self) -> int:
        return self._refcount

    @property
    def package_name(self) -> str | None:
        self._check_alive()
        return self._package_name

    @property
    def component(self) -> str | None:
        self._check_alive()
        return self._component

    def get_package_name(self) -> str | None:
        """Return the package name, or None if it was not found."""
        return self.package_name

    def get_component(self) -> str | None:
        """Return the component, or None if it was not found."""
        return self.component

    def ref(self) -> "Metadata":
        """Take an additional reference to this record.

        Returns:
            This record

        Raises:
            MetadataReleasedError: If the record was already released
        """
        with self._lock:
            self._check_alive()
            self._refcount += 1
        return self

    def unref(self) -> "Metadata | None":
        """Release one reference to this record.

        Returns:
            This record while references remain, or None once the last
            reference has been released

        Raises:
            MetadataReleasedError: If the record was already released
        """
        with self._lock:
            self._check_alive()
            self._refcount -= 1
            if self._refcount > 0:
                return self
            self._clear()
        return None

    def load(self, source: Source) -> bool:
        """Load package metadata from a metadata.xml file.

        Both fields are reset before parsing, so a failed load never leaves
        values from an earlier document behind.

        Args:
            source: Filesystem path or binary file object

        Returns:
            True if the document was well-formed, False otherwise
        """
        self._check_alive()
        self._clear()
        parser = MetadataParser(self._config)
        try:
            result = parser.parse(source)
        except etree.XMLSyntaxError as e:
            self._logger.error(f"Badly formed XML file {source}, aborting: {e}")
            return False
        except OSError as e:
            self._logger.error(f"Error creating XML context for {source}: {e}")
            return False
        return self._adopt(result, source)

    def loads(self, text: str | bytes) -> bool:
        """Load package metadata from an in-memory document.

        Args:
            text: Document content

        Returns:
            True if the document was well-formed, False otherwise
        """
        self._check_alive()
        self._clear()
        parser = MetadataParser(self._config)
        try:
            result = parser.parse_string(text)
        except etree.XMLSyntaxError as e:
            self._logger.error(f"Badly formed XML document, aborting: {e}")
            return False
        except ValueError as e:
            # lxml rejects str input that carries an encoding declaration
            self._logger.error(f"Unreadable XML document, aborting: {e}")
            return False
        return self._adopt(result, "<string>")

    def to_schema(self) -> PackageMetadata:
        """Return the current values as a PackageMetadata model."""
        return PackageMetadata(package_name=self.package_name, component=self.component)

    def _adopt(self, result: PackageMetadata, source) -> bool:
        self._package_name = result.package_name
        self._component = result.component
        self._logger.debug(
            f"Loaded metadata from {source}: "
            f"package_name={self._package_name!r} component={self._component!r}"
        )
        return True

    def _clear(self) -> None:
        self._package_name = None
        self._component = None

    def _check_alive(self) -> None:
        if self._refcount == 0:
            raise MetadataReleasedError()


def load_metadata(
    source: Source,
    config: dict | None = None,
    logger: logging.Logger | None = None,
) -> Metadata | None:
    """Create a record and load it from ``source``.

    Args:
        source: Filesystem path or binary file object
        config: Tokenizer configuration passed to MetadataParser
        logger: Destination for load diagnostics

    Returns:
        The loaded record holding one reference, or None if loading failed
    """
    metadata = Metadata(config=config, logger=logger)
    if metadata.load(source):
        return metadata
    metadata.unref()
    return None
