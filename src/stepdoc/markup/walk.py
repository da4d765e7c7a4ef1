"""Sub-tree walk shared by every parameter decoder.

A decoder is handed the cursor just past its own opening tag. It then reads
the events of its sub-tree through a SubtreeWalk, which keeps the depth
count and stops exactly at the matching close. Nested elements can be handed
to another decoder with ``delegate``; the depth bookkeeping for that hand-off
lives here and nowhere else.
"""

from collections.abc import Iterator
from typing import Protocol, TypeVar

from ..logging import get_logger
from ..parse_exceptions import EventDecodeError, ParseError
from .cursor import EventCursor
from .diagnostics import DiagnosticKind, Diagnostics
from .events import ElementClose, ElementOpen, EndOfInput, MarkupEvent

logger = get_logger(__name__)

T_co = TypeVar("T_co", covariant=True)


class ElementDecoder(Protocol[T_co]):
    """Anything that decodes one element's full sub-tree, closing tag included."""

    def decode(
        self,
        cursor: EventCursor,
        element: ElementOpen,
        diagnostics: Diagnostics | None = None,
    ) -> T_co:
        ...


class SubtreeWalk:
    """Iterator over the events strictly inside one element.

    The subject's own closing tag is consumed but not yielded. After the
    iterator is exhausted the cursor sits on the first event after that
    closing tag, or at end of input.
    """

    def __init__(
        self,
        cursor: EventCursor,
        diagnostics: Diagnostics | None = None,
        subject: str | None = None,
    ) -> None:
        """Start a walk.

        Args:
            cursor: Cursor already past the subject's opening tag
            diagnostics: Optional collector for skipped events and failures
            subject: Name of the subject element, used in diagnostics
        """
        self.cursor = cursor
        self.diagnostics = diagnostics
        self.subject = subject
        self.depth = 1
        self.finished = False
        self.truncated = False
        self._last_open: ElementOpen | None = None

    def __iter__(self) -> Iterator[MarkupEvent]:
        return self

    def __next__(self) -> MarkupEvent:
        if self.finished:
            raise StopIteration

        event = self._pull()
        self._last_open = None

        if isinstance(event, EndOfInput):
            # Treated as an implicit close
            self.finished = True
            self.truncated = True
            self._report(DiagnosticKind.TRUNCATED, "input ended inside element")
            raise StopIteration

        if isinstance(event, ElementOpen):
            self.depth += 1
            self._last_open = event
        elif isinstance(event, ElementClose):
            self.depth -= 1
            if self.depth == 0:
                self.finished = True
                raise StopIteration

        return event

    def _pull(self) -> MarkupEvent:
        while True:
            try:
                return self.cursor.next_event()
            except EventDecodeError as e:
                self._report(DiagnosticKind.EVENT_SKIPPED, str(e))

    def _report(self, kind: DiagnosticKind, message: str) -> None:
        if self.diagnostics is not None:
            self.diagnostics.report(kind, message, self.subject)
        else:
            logger.debug("decode_diagnostic", kind=kind.value, element=self.subject, detail=message)

    def delegate(self, decoder: ElementDecoder[T_co], element: ElementOpen) -> T_co | None:
        """Hand the element just yielded to another decoder.

        The other decoder consumes the element's whole sub-tree including its
        closing tag. The open already counted for that element is taken back
        whether the decoder succeeds or raises.

        Args:
            decoder: Decoder for the nested element
            element: The ElementOpen most recently yielded by this walk

        Returns:
            The decoder's result, or None if it raised ParseError

        Raises:
            RuntimeError: If element is not the most recently yielded open
        """
        if self._last_open is None or self._last_open is not element:
            raise RuntimeError(
                f"Can only delegate the element just opened, not '{element.name}'"
            )
        self._last_open = None

        try:
            return decoder.decode(self.cursor, element, self.diagnostics)
        except ParseError as e:
            self._report(DiagnosticKind.DELEGATE_FAILED, str(e))
            return None
        finally:
            self.depth -= 1
            if self.cursor.exhausted:
                # The delegate ran off the end; nothing is left for this walk either
                self.finished = True
                self.truncated = True

    def skip(self) -> None:
        """Consume the rest of the subject's sub-tree."""
        for _ in self:
            pass
