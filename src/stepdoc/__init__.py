"""stepdoc: readable descriptions of exported script step parameters.

Decoders pull markup events from a shared cursor, tolerate malformed or
truncated input, and return frozen records that render to display strings.
"""

from .base_exceptions import StepdocException
from .markup import Diagnostics, EventCursor
from .parse_exceptions import EventDecodeError, ParseError
from .script_steps import (
    ButtonRecord,
    DialogFieldRecord,
    Role,
    ShowCustomDialogStep,
    describe_steps,
)

__version__ = "0.1.0"

__all__ = [
    "ButtonRecord",
    "DialogFieldRecord",
    "Diagnostics",
    "EventCursor",
    "EventDecodeError",
    "ParseError",
    "Role",
    "ShowCustomDialogStep",
    "StepdocException",
    "describe_steps",
]
