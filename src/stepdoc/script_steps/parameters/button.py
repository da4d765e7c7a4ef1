"""Dialog button parameter.

A button's label comes from the opening tag's ``value`` attribute, or
failing that from the first non-empty text found inside a nested ``Text``
element. Its commit flag follows the ``value`` of the last nested
``Boolean`` element that carries one.
"""

from dataclasses import dataclass

from ...markup import (
    Diagnostics,
    ElementClose,
    ElementOpen,
    EventCursor,
    SubtreeWalk,
    TextBlock,
    get_attribute,
)
from ..roles import Role, UnrecognizedRole, resolve_role


@dataclass(frozen=True)
class ButtonRecord:
    """Decoded dialog button."""

    label: str | None = None
    commit: bool = False

    @classmethod
    def decode(
        cls,
        cursor: EventCursor,
        element: ElementOpen,
        diagnostics: Diagnostics | None = None,
    ) -> "ButtonRecord":
        """Decode a button from the cursor.

        Never raises for malformed or truncated input; whatever was found
        before the problem is kept.

        Args:
            cursor: Cursor just past the button's opening tag
            element: The button's opening tag
            diagnostics: Optional collector for skipped events

        Returns:
            The decoded button
        """
        label = get_attribute(element, "value")
        commit = False
        in_text = False

        for event in SubtreeWalk(cursor, diagnostics, subject=element.name):
            if isinstance(event, ElementOpen):
                if event.name == "Text":
                    in_text = True
                elif event.name == "Boolean":
                    value = get_attribute(event, "value")
                    if value is not None:
                        commit = value == "True"
            elif isinstance(event, ElementClose):
                if event.name == "Text":
                    in_text = False
            elif isinstance(event, TextBlock):
                if in_text and label is None and event.text:
                    label = event.text

        return cls(label=label, commit=commit)

    def display(self, role: str | Role | UnrecognizedRole) -> str | None:
        return render_button(self, role)


def render_button(button: ButtonRecord, role: str | Role | UnrecognizedRole) -> str | None:
    """Render a button as ``"{name}: {label}"``.

    Args:
        button: Decoded button
        role: Role tag such as "Button1"; unrecognized tags are shown as-is

    Returns:
        Display string, or None if the button has no label
    """
    if not button.label:
        return None
    return f"{resolve_role(role).button_name}: {button.label}"
