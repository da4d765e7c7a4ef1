"""Script step parameter decoders.

Every decoder exposes ``decode(cursor, element, diagnostics=None)``, which
consumes the element's sub-tree through its closing tag, and a ``display``
method producing the rendered form.
"""

from .button import ButtonRecord, render_button
from .calculation import CalculationRecord
from .dialog_field import DialogFieldRecord, render_dialog_field
from .target import TargetRecord

__all__ = [
    "ButtonRecord",
    "CalculationRecord",
    "DialogFieldRecord",
    "TargetRecord",
    "render_button",
    "render_dialog_field",
]
