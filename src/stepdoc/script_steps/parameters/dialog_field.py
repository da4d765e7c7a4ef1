"""Dialog input field parameter.

The field's target and label are nested ``Parameter`` elements handed to
the target and calculation decoders; only their rendered strings are kept.
"""

from dataclasses import dataclass

from ...logging import get_logger
from ...markup import (
    Diagnostics,
    ElementOpen,
    EventCursor,
    SubtreeWalk,
    get_attribute,
)
from ..roles import Role, UnrecognizedRole, resolve_role
from .calculation import CalculationRecord
from .target import TargetRecord

logger = get_logger(__name__)


@dataclass(frozen=True)
class DialogFieldRecord:
    """Decoded dialog input field."""

    target: str | None = None
    label: str | None = None
    password: bool = False

    @classmethod
    def decode(
        cls,
        cursor: EventCursor,
        element: ElementOpen,
        diagnostics: Diagnostics | None = None,
    ) -> "DialogFieldRecord":
        """Decode an input field from the cursor.

        Never raises for malformed or truncated input. A target or label
        whose decoder fails stays absent.

        Args:
            cursor: Cursor just past the field's opening tag
            element: The field's opening tag
            diagnostics: Optional collector for skipped events and failed
                target/label decodes

        Returns:
            The decoded field
        """
        target = None
        label = None
        password = False
        walk = SubtreeWalk(cursor, diagnostics, subject=element.name)

        for event in walk:
            if not isinstance(event, ElementOpen):
                continue

            if event.name == "Parameter":
                param_type = get_attribute(event, "type")
                if param_type == "Target":
                    decoded = walk.delegate(TargetRecord, event)
                    if decoded is not None:
                        target = decoded.display()
                elif param_type == "Label":
                    calc = walk.delegate(CalculationRecord, event)
                    if calc is not None:
                        label = calc.display()
            elif event.name == "Boolean":
                is_password = get_attribute(event, "type") == "Password"
                if is_password and get_attribute(event, "value") == "True":
                    password = True

        if target is None:
            logger.debug("dialog_field_without_target", role=get_attribute(element, "type"))

        return cls(target=target, label=label, password=password)

    def display(self, role: str | Role | UnrecognizedRole) -> str | None:
        return render_dialog_field(self, role)


def render_dialog_field(
    field: DialogFieldRecord, role: str | Role | UnrecognizedRole
) -> str | None:
    """Render an input field as ``"Input N: target ; Label N: label ; Password"``.

    The label clause appears only for a non-empty label and the password
    clause only when the field is a password field.

    Args:
        field: Decoded field
        role: Role tag such as "Field1"; unrecognized tags number as "?"

    Returns:
        Display string, or None if the field has no target
    """
    if field.target is None:
        return None

    number = resolve_role(role).field_number
    parts = [f"Input {number}: {field.target}"]

    if field.label:
        parts.append(f"Label {number}: {field.label}")

    if field.password:
        parts.append("Password")

    return " ; ".join(parts)
