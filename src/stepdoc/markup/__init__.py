"""Markup events, the event cursor and the shared sub-tree walk."""

from .attributes import get_attribute
from .cursor import EventCursor
from .diagnostics import Diagnostic, DiagnosticKind, Diagnostics
from .events import ElementClose, ElementOpen, EndOfInput, MarkupEvent, TextBlock
from .walk import ElementDecoder, SubtreeWalk

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "Diagnostics",
    "ElementClose",
    "ElementDecoder",
    "ElementOpen",
    "EndOfInput",
    "EventCursor",
    "MarkupEvent",
    "SubtreeWalk",
    "TextBlock",
    "get_attribute",
]
