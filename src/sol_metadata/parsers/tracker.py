"""Toggle-based tag tracking for metadata.xml documents.

The metadata.xml schema is closed and non-recursive: no element name is
reused at a different depth and no element nests inside itself. Under that
constraint, flipping a flag on both the opening and the closing tag is
equivalent to pushing and popping a stack, so the tracker keeps a single
bitmask instead of an element stack. Input that breaks the schema (for
example a ``<Name>`` nested inside another ``<Name>``) is tracked with the
same toggle rule and is not corrected.
"""

from enum import Flag, auto


class ParseFlag(Flag):
    """Recognized element names in a metadata.xml document."""

    ROOT = auto()
    PACKAGE = auto()
    HISTORY = auto()
    SOURCE = auto()
    NAME = auto()
    COMPONENT = auto()
    PACKAGER = auto()
    EMAIL = auto()


NO_FLAGS = ParseFlag(0)

# Both spellings mark the same root.
ROOT_TAGS: tuple[str, ...] = ("PISI", "SOL")

# Checked in order, first match wins.
TAG_FLAGS: tuple[tuple[str, ParseFlag], ...] = (
    ("Package", ParseFlag.PACKAGE),
    ("History", ParseFlag.HISTORY),
    ("Source", ParseFlag.SOURCE),
    ("Name", ParseFlag.NAME),
    ("PartOf", ParseFlag.COMPONENT),
    ("Packager", ParseFlag.PACKAGER),
    ("Email", ParseFlag.EMAIL),
)


class TagTracker:
    """Track which recognized elements are currently open.

    Attributes:
        flags: The active-state set for the current parse
    """

    def __init__(self):
        self.flags = NO_FLAGS

    @property
    def in_root(self) -> bool:
        return ParseFlag.ROOT in self.flags

    def reset(self) -> None:
        """Clear the active-state set before a new parse."""
        self.flags = NO_FLAGS

    def on_tag_event(self, tag: str) -> None:
        """Flip the flag for ``tag`` on an opening or closing tag.

        Root tags always flip the root flag. Any other tag is only
        considered while inside the root, and unknown tags are ignored.

        Args:
            tag: Element name as reported by the tokenizer
        """
        if tag in ROOT_TAGS:
            self.flags ^= ParseFlag.ROOT
            return

        if not self.in_root:
            return

        for key, flag in TAG_FLAGS:
            if tag == key:
                self.flags ^= flag
                return
