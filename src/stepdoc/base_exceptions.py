"""Root of the stepdoc exception hierarchy.

Errors raised while reading markup point back into it: besides an error
code and free-form context they may name the element being decoded and
the source line the parser was on.
"""

from typing import Any


class StepdocException(Exception):
    """Base exception for all stepdoc errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for programmatic handling
        element: Name of the element being decoded, if known
        line: Source line reported by the parser, if known
        context: Additional context information
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        element: str | None = None,
        line: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.element = element
        self.line = line
        self.context = context or {}

    @property
    def location(self) -> str | None:
        """Where in the markup the error happened, e.g. ``<Variable>, line 3``."""
        parts = []
        if self.element:
            parts.append(f"<{self.element}>")
        if self.line is not None:
            parts.append(f"line {self.line}")
        return ", ".join(parts) or None

    def __str__(self) -> str:
        text = f"[{self.error_code}] {self.message}" if self.error_code else self.message
        location = self.location
        return f"{text} ({location})" if location else text
