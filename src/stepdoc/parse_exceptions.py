"""Markup decoding exceptions.

Neither exception escapes the dialog button or dialog field decoders. They
exist so that cursors and collaborator decoders can signal trouble that the
calling decoder turns into an absent field or a diagnostic.
"""

from .base_exceptions import StepdocException


class ParseError(StepdocException):
    """Raised by a parameter decoder that could not produce a value."""

    def __init__(self, element: str, reason: str, line: int | None = None, **kwargs) -> None:
        super().__init__(
            f"Could not decode element: {reason}",
            error_code="PARSE_ERROR",
            element=element,
            line=line,
            context={"reason": reason, **kwargs},
        )


class EventDecodeError(StepdocException):
    """Raised by an event cursor for a single malformed token.

    The event is skippable: pulling again continues with the next event.
    """

    def __init__(self, reason: str, line: int | None = None, **kwargs) -> None:
        super().__init__(
            f"Malformed markup event: {reason}",
            error_code="EVENT_DECODE_ERROR",
            line=line,
            context={"reason": reason, **kwargs},
        )
