"""Human-readable descriptions of exported script steps."""

from .parameters import (
    ButtonRecord,
    CalculationRecord,
    DialogFieldRecord,
    TargetRecord,
    render_button,
    render_dialog_field,
)
from .roles import Role, UnrecognizedRole, resolve_role
from .show_custom_dialog import ShowCustomDialogStep, describe_steps

__all__ = [
    "ButtonRecord",
    "CalculationRecord",
    "DialogFieldRecord",
    "Role",
    "ShowCustomDialogStep",
    "TargetRecord",
    "UnrecognizedRole",
    "describe_steps",
    "render_button",
    "render_dialog_field",
    "resolve_role",
]
