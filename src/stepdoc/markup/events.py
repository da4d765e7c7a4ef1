"""Markup events produced by an event cursor.

A cursor yields a forward-only sequence of these four kinds. Decoders only
ever look at element names, attributes and text; everything else the
underlying parser sees (comments, processing instructions, whitespace
between elements) is dropped before it reaches them.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

Attributes = tuple[tuple[str, str | bytes], ...]


@dataclass(frozen=True)
class ElementOpen:
    """An element's opening tag.

    Attributes may be given as a mapping; they are stored as name/value
    pairs sorted by name, so events compare and hash by content.
    """

    name: str
    attributes: Attributes | Mapping[str, str | bytes] = field(default=())

    def __post_init__(self) -> None:
        pairs = self.attributes.items() if isinstance(self.attributes, Mapping) else self.attributes
        object.__setattr__(self, "attributes", tuple(sorted(pairs, key=lambda pair: pair[0])))

    def get(self, name: str) -> str | bytes | None:
        """Raw attribute value, or None if the attribute is missing."""
        for key, value in self.attributes:
            if key == name:
                return value
        return None


@dataclass(frozen=True)
class ElementClose:
    """An element's closing tag."""

    name: str


@dataclass(frozen=True)
class TextBlock:
    """Non-blank character data (CDATA or plain text), indentation trimmed."""

    text: str


@dataclass(frozen=True)
class EndOfInput:
    """The buffer is exhausted."""


MarkupEvent = ElementOpen | ElementClose | TextBlock | EndOfInput
