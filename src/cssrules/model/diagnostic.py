"""Diagnostic model: structured findings about a ruleset."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a ruleset.

    Attributes:
        rule: Identifier for the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        key: The attribute involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    key: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [key={self.key}]" if self.key is not None else ""
        return f"{self.severity.value}{location}: {self.message}"
