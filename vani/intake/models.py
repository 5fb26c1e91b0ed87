from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    """How a diagnostic is surfaced to the user."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class UploadedFile:
    """A user-supplied document pending or accepted for analysis.

    ``mime_type`` is whatever the browser or OS declared; it is passed on to
    the model but never used for validation.
    """

    name: str
    size: int
    mime_type: str = ""
    content: bytes = field(default=b"", repr=False)


@dataclass(frozen=True)
class Diagnostic:
    """A user-facing message about a rejected file or a truncated batch."""

    severity: Severity
    title: str
    description: str


@dataclass(frozen=True)
class IntakeResult:
    """Next accepted set plus the diagnostics produced while computing it."""

    accepted: tuple[UploadedFile, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]
