"""Role tags selecting how a dialog parameter is rendered.

A role is supplied only at render time. It never influences decoding and is
never stored in a decoded record.
"""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Recognized dialog parameter roles."""

    BUTTON1 = "Button1"
    BUTTON2 = "Button2"
    BUTTON3 = "Button3"
    FIELD1 = "Field1"
    FIELD2 = "Field2"
    FIELD3 = "Field3"

    @property
    def button_name(self) -> str:
        """Name shown in front of a button's label.

        Returns:
            Display name, or the raw tag for roles that are not buttons
        """
        return _BUTTON_NAMES.get(self, self.value)

    @property
    def field_number(self) -> str:
        """Number shown in an input field's clauses.

        Returns:
            Field number, or "?" for roles that are not fields
        """
        return _FIELD_NUMBERS.get(self, "?")

    def is_button(self) -> bool:
        return self in _BUTTON_NAMES

    def is_field(self) -> bool:
        return self in _FIELD_NUMBERS


_BUTTON_NAMES = {
    Role.BUTTON1: "Default Button",
    Role.BUTTON2: "Button 2",
    Role.BUTTON3: "Button 3",
}

_FIELD_NUMBERS = {
    Role.FIELD1: "1",
    Role.FIELD2: "2",
    Role.FIELD3: "3",
}


@dataclass(frozen=True)
class UnrecognizedRole:
    """Fallback for any tag outside the Role enumeration."""

    tag: str

    @property
    def button_name(self) -> str:
        return self.tag

    @property
    def field_number(self) -> str:
        return "?"

    def is_button(self) -> bool:
        return False

    def is_field(self) -> bool:
        return False


def resolve_role(tag: "str | Role | UnrecognizedRole") -> "Role | UnrecognizedRole":
    """Map a caller-supplied role tag to a role.

    Args:
        tag: Raw tag such as "Button1", or an already resolved role

    Returns:
        The matching Role member, or UnrecognizedRole carrying the raw tag
    """
    if isinstance(tag, (Role, UnrecognizedRole)):
        return tag
    try:
        return Role(tag)
    except ValueError:
        return UnrecognizedRole(tag)
