"""Calculation parameter decoder."""

from dataclasses import dataclass

from ...markup import (
    Diagnostics,
    ElementClose,
    ElementOpen,
    EventCursor,
    SubtreeWalk,
    TextBlock,
)
from ...parse_exceptions import ParseError


@dataclass(frozen=True)
class CalculationRecord:
    """A calculation expression, kept as the literal text of its Text elements."""

    text: str = ""

    @classmethod
    def decode(
        cls,
        cursor: EventCursor,
        element: ElementOpen,
        diagnostics: Diagnostics | None = None,
    ) -> "CalculationRecord":
        """Decode a calculation from the element's sub-tree.

        Text blocks found inside any nested Text element are concatenated
        in document order.

        Raises:
            ParseError: If the input ends before the element's closing tag
        """
        walk = SubtreeWalk(cursor, diagnostics, subject=element.name)
        parts: list[str] = []
        in_text = False

        for event in walk:
            if isinstance(event, ElementOpen) and event.name == "Text":
                in_text = True
            elif isinstance(event, ElementClose) and event.name == "Text":
                in_text = False
            elif isinstance(event, TextBlock) and in_text:
                parts.append(event.text)

        if walk.truncated:
            raise ParseError(element.name, "input ended before closing tag")

        return cls("".join(parts))

    def display(self) -> str | None:
        return self.text or None
