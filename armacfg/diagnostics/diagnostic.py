"""Diagnostics core types."""

from dataclasses import dataclass

from armacfg.diagnostics.codes import DiagnosticSpec, Severity
from armacfg.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer/parser."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        range: TextRange,
        *,
        message: str | None = None,
    ) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
