"""Target parameter decoder.

A target names where a step writes its result: a variable (``$name``) or a
field (``Table::Field``), optionally with a repetition calculation.
"""

from dataclasses import dataclass

from ...markup import (
    Diagnostics,
    ElementOpen,
    EventCursor,
    SubtreeWalk,
    get_attribute,
)
from ...parse_exceptions import ParseError
from .calculation import CalculationRecord


@dataclass(frozen=True)
class TargetRecord:
    """Decoded target reference."""

    reference: str | None = None
    repetition: str | None = None

    @classmethod
    def decode(
        cls,
        cursor: EventCursor,
        element: ElementOpen,
        diagnostics: Diagnostics | None = None,
    ) -> "TargetRecord":
        """Decode a target from the element's sub-tree.

        Raises:
            ParseError: If the input ends before the element's closing tag
        """
        walk = SubtreeWalk(cursor, diagnostics, subject=element.name)
        reference = None
        repetition = None

        for event in walk:
            if not isinstance(event, ElementOpen):
                continue
            if event.name == "Variable":
                reference = get_attribute(event, "value")
            elif event.name == "Field":
                name = get_attribute(event, "name")
                table = get_attribute(event, "table")
                if name:
                    reference = f"{table}::{name}" if table else name
            elif event.name == "repetition":
                calc = walk.delegate(CalculationRecord, event)
                if calc is not None:
                    repetition = calc.display()

        if walk.truncated:
            raise ParseError(element.name, "input ended before closing tag")

        return cls(reference, repetition)

    def display(self) -> str | None:
        if not self.reference:
            return None
        if self.repetition and self.repetition.strip() != "1":
            return f"{self.reference}[{self.repetition.strip()}]"
        return self.reference
