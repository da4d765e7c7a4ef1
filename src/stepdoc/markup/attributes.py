"""Attribute lookup on opening-tag events."""

from .events import ElementOpen, MarkupEvent


def get_attribute(event: MarkupEvent, name: str) -> str | None:
    """Return the string value of a named attribute.

    Args:
        event: Event to inspect; only ElementOpen events carry attributes
        name: Attribute name

    Returns:
        The attribute value, or None if the attribute is missing or its
        value is not valid UTF-8
    """
    if not isinstance(event, ElementOpen):
        return None

    value = event.get(name)
    if value is None:
        return None
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return None
    return value
