"""Pytest configuration and fixtures."""

import pytest

from stepdoc.config import reset_settings
from stepdoc.markup import ElementOpen, EventCursor


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment tweaks in a test take effect."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def read_parameter():
    """Build a cursor over an XML snippet and consume its opening tag.

    Returns a callable giving (cursor, opening_event).
    """

    def _read(xml: str, recover: bool | None = None) -> tuple[EventCursor, ElementOpen]:
        cursor = EventCursor.from_bytes(xml.strip(), recover=recover)
        element = cursor.next_event()
        if not isinstance(element, ElementOpen):
            pytest.fail(f"Wrong read event: {element!r}")
        return cursor, element

    return _read
