"""Caller-visible record of what a tolerant decode skipped or gave up on."""

from dataclasses import dataclass, field
from enum import Enum

from ..logging import get_logger

logger = get_logger(__name__)


class DiagnosticKind(Enum):
    """Kinds of decode diagnostics."""

    EVENT_SKIPPED = "event_skipped"
    """The cursor reported a malformed token, which was skipped."""

    TRUNCATED = "truncated"
    """The input ended before the element's matching close."""

    DELEGATE_FAILED = "delegate_failed"
    """A collaborator decoder raised ParseError; its field stays absent."""


@dataclass(frozen=True)
class Diagnostic:
    """A single decode diagnostic."""

    kind: DiagnosticKind
    message: str
    element: str | None = None


@dataclass
class Diagnostics:
    """Collector passed into decoders by callers that want to inspect skips.

    Decoded records never hold diagnostics; the collector is the only channel.
    """

    entries: list[Diagnostic] = field(default_factory=list)

    def report(self, kind: DiagnosticKind, message: str, element: str | None = None) -> None:
        """Record a diagnostic and log it at debug level."""
        self.entries.append(Diagnostic(kind, message, element))
        logger.debug("decode_diagnostic", kind=kind.value, element=element, detail=message)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [entry for entry in self.entries if entry.kind is kind]
