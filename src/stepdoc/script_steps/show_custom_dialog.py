"""Show Custom Dialog script step.

Renders a whole step in the same bracketed form the script editor shows,
for example::

    Show Custom Dialog [ Title: "Login" ; Default Button: OK ; Input 1: $user ]
"""

from dataclasses import dataclass, field

from ..logging import get_logger
from ..markup import (
    Diagnostics,
    ElementOpen,
    EventCursor,
    SubtreeWalk,
    get_attribute,
)
from .parameters import ButtonRecord, CalculationRecord, DialogFieldRecord
from .roles import resolve_role

logger = get_logger(__name__)

STEP_NAME = "Show Custom Dialog"


@dataclass(frozen=True)
class ShowCustomDialogStep:
    """Decoded Show Custom Dialog step.

    Attributes:
        parts: Rendered clauses in document order
        enabled: False if the step is disabled in the script
    """

    parts: tuple[str, ...] = field(default_factory=tuple)
    enabled: bool = True

    @classmethod
    def decode(
        cls,
        cursor: EventCursor,
        element: ElementOpen,
        diagnostics: Diagnostics | None = None,
    ) -> "ShowCustomDialogStep":
        """Decode the step's parameters.

        Parameters may sit directly under the step or inside a
        ParameterValues wrapper. Unknown parameter types are skipped.
        """
        parts: list[str] = []
        walk = SubtreeWalk(cursor, diagnostics, subject=element.name)

        for event in walk:
            if not isinstance(event, ElementOpen) or event.name != "Parameter":
                continue

            param_type = get_attribute(event, "type") or ""
            role = resolve_role(param_type)
            rendered: str | None = None

            if param_type in ("Title", "Message"):
                calc = walk.delegate(CalculationRecord, event)
                text = calc.display() if calc is not None else None
                if text:
                    rendered = f"{param_type}: {text}"
            elif role.is_button():
                button = walk.delegate(ButtonRecord, event)
                if button is not None:
                    rendered = button.display(role)
            elif role.is_field():
                dialog_field = walk.delegate(DialogFieldRecord, event)
                if dialog_field is not None:
                    rendered = dialog_field.display(role)
            else:
                logger.debug("unknown_dialog_parameter", type=param_type)

            if rendered:
                parts.append(rendered)

        return cls(parts=tuple(parts), enabled=get_attribute(element, "enable") != "False")

    def display(self) -> str:
        prefix = "" if self.enabled else "// "
        if not self.parts:
            return f"{prefix}{STEP_NAME}"
        return f"{prefix}{STEP_NAME} [ {' ; '.join(self.parts)} ]"


def describe_steps(buffer: bytes | str, diagnostics: Diagnostics | None = None) -> list[str]:
    """Render every Show Custom Dialog step found in a markup buffer.

    Args:
        buffer: Exported script markup
        diagnostics: Optional collector for skipped events and failed decodes

    Returns:
        One line per Show Custom Dialog step, in document order
    """
    cursor = EventCursor.from_bytes(buffer)
    lines: list[str] = []

    while True:
        event = cursor.next_open(diagnostics)
        if event is None:
            break
        if event.name == "Step" and get_attribute(event, "name") == STEP_NAME:
            lines.append(ShowCustomDialogStep.decode(cursor, event, diagnostics).display())

    logger.debug("described_steps", count=len(lines))
    return lines
