"""Forward-only event cursor over an in-memory markup buffer."""

from collections.abc import Iterable, Iterator

from lxml import etree

from ..config import get_settings
from ..parse_exceptions import EventDecodeError
from .diagnostics import DiagnosticKind, Diagnostics
from .events import ElementClose, ElementOpen, EndOfInput, MarkupEvent, TextBlock

END_OF_INPUT = EndOfInput()


def _local_name(name: str) -> str:
    # "{namespace}Tag" -> "Tag"
    if "}" in name:
        return name.split("}", 1)[1]
    return name


def _trim_formatting(text: str) -> str:
    """Strip indentation around character data.

    A leading or trailing whitespace run counts as formatting only when it
    contains a line break; whitespace on the same line as the data is kept.
    """
    leading = text[: len(text) - len(text.lstrip())]
    if "\n" in leading:
        text = text.lstrip()
    trailing = text[len(text.rstrip()) :]
    if "\n" in trailing:
        text = text.rstrip()
    return text


def _text_block(text: str | None) -> TextBlock | None:
    if text is None or not text.strip():
        return None
    return TextBlock(_trim_formatting(text))


def _translate(action: str, element: etree._Element) -> Iterator[MarkupEvent]:
    """Turn one lxml start/end event into markup events.

    Character data is reported in document order: an element's leading text
    when its first child opens or when it closes, and a child's tail when
    the next sibling opens or the parent closes.
    """
    name = _local_name(element.tag)

    if action == "start":
        previous = element.getprevious()
        if previous is not None:
            block = _text_block(previous.tail)
        else:
            parent = element.getparent()
            block = _text_block(parent.text) if parent is not None else None
        if block is not None:
            yield block
        attributes = {_local_name(key): value for key, value in element.attrib.items()}
        yield ElementOpen(name, attributes)
        return

    block = _text_block(element[-1].tail if len(element) else element.text)
    if block is not None:
        yield block
    yield ElementClose(name)


def _iter_buffer_events(
    buffer: bytes, recover: bool
) -> Iterator[MarkupEvent | EventDecodeError]:
    """Pull markup events out of a buffer with lxml's pull parser.

    The buffer is fed line by line so that errors the parser recovers from
    surface as EventDecodeError right after the events of the line they
    occurred on. If closing the parser reports errors, the buffer was cut
    short and the parser closes the open elements on its own; those closes
    are dropped so that readers see the input end instead.
    """
    parser = etree.XMLPullParser(
        events=("start", "end"),
        recover=recover,
        resolve_entities=False,
        remove_comments=True,
        remove_pis=True,
    )
    reported = 0

    def new_errors() -> list:
        nonlocal reported
        errors = list(parser.feed_error_log.filter_from_errors())
        fresh = errors[reported:]
        reported = len(errors)
        return fresh

    try:
        for line in buffer.splitlines(keepends=True):
            parser.feed(line)
            for action, element in parser.read_events():
                yield from _translate(action, element)
            for error in new_errors():
                yield EventDecodeError(error.message, line=error.line)
        parser.close()
    except etree.ParseError as e:
        yield EventDecodeError(str(e), line=getattr(e, "lineno", None))
        return

    closing = list(parser.read_events())
    unclosed = new_errors()
    for action, element in closing:
        if unclosed and action == "end":
            break
        yield from _translate(action, element)
    if unclosed:
        yield EventDecodeError(unclosed[0].message, line=unclosed[0].line)


class EventCursor:
    """Pull-based cursor handing out one markup event at a time.

    The cursor is shared by every decoder working on the same buffer. Only
    one decoder pulls from it at any moment.

    Items of the wrapped iterable that are EventDecodeError instances are
    raised from next_event(); pulling again continues with the next item.
    """

    def __init__(self, events: Iterable[MarkupEvent | EventDecodeError]) -> None:
        self._events = iter(events)
        self._exhausted = False

    @classmethod
    def from_bytes(cls, buffer: bytes | str, recover: bool | None = None) -> "EventCursor":
        """Create a cursor over an XML buffer.

        Args:
            buffer: Markup to read; str input is encoded as UTF-8
            recover: Let the parser repair malformed markup. Defaults to
                the recover_markup setting.

        Returns:
            Cursor positioned before the first event
        """
        if isinstance(buffer, str):
            buffer = buffer.encode("utf-8")
        if recover is None:
            recover = get_settings().recover_markup
        return cls(_iter_buffer_events(buffer, recover))

    @property
    def exhausted(self) -> bool:
        """True once EndOfInput has been handed out."""
        return self._exhausted

    def next_event(self) -> MarkupEvent:
        """Pull the next event.

        Returns:
            The next event; EndOfInput forever once the input is used up

        Raises:
            EventDecodeError: If the next token is malformed. The token is
                consumed, so the caller may simply pull again.
        """
        if self._exhausted:
            return END_OF_INPUT

        try:
            item = next(self._events)
        except StopIteration:
            self._exhausted = True
            return END_OF_INPUT

        if isinstance(item, EventDecodeError):
            raise item
        if isinstance(item, EndOfInput):
            self._exhausted = True
        return item

    def next_open(self, diagnostics: Diagnostics | None = None) -> ElementOpen | None:
        """Skip ahead to the next opening tag.

        Decode errors are skipped along the way and reported to diagnostics.

        Args:
            diagnostics: Optional collector for skipped events

        Returns:
            The next ElementOpen, or None at end of input
        """
        while True:
            try:
                event = self.next_event()
            except EventDecodeError as e:
                if diagnostics is not None:
                    diagnostics.report(DiagnosticKind.EVENT_SKIPPED, str(e))
                continue
            if isinstance(event, ElementOpen):
                return event
            if isinstance(event, EndOfInput):
                return None
