"""Rendering of diagnostics for terminals, logs and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_SEVERITY = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
}
_ANSI_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """How DiagnosticFormatter lays out a diagnostic."""

    RUST = "rust"  # headline, location arrow, "= key: value" notes
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # one JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Renders Diagnostic values as text.

    Attributes:
        output_format: Layout to produce
        sanitize: Truncate user-derived text (message and received value)
        color: Wrap the severity in ANSI colors (RUST layout only)
        max_content_length: Truncation length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.occurrence_count_zero()))
        OCCURRENCE_COUNT_ZERO: occurrence count must be at least 1
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured layout."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics separated by blank lines."""
        return "\n\n".join(map(self.format, diagnostics))

    def _notes(self, diagnostic: Diagnostic) -> list[tuple[str, str]]:
        # Field order is the display order of both RUST notes and JSON keys.
        notes = [
            ("component", diagnostic.component),
            ("expected", diagnostic.expected),
            ("received", diagnostic.received and self._clip(diagnostic.received)),
            ("help", diagnostic.hint),
        ]
        return [(key, value) for key, value in notes if value]

    def _rust(self, diagnostic: Diagnostic) -> str:
        """RUST layout.

        Example output:
            error[DESCRIPTION_INVALID_COMPONENT_NAME]: invalid format description: ...
              --> line 1, column 2
              = help: Component names are lowercase, e.g. [year], [month], [offset_hour]
        """
        severity = "warning" if diagnostic.severity == "warning" else "error"
        if self.color:
            severity = f"{_ANSI_SEVERITY[severity]}{severity}{_ANSI_RESET}"

        lines = [f"{severity}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        span = diagnostic.span
        if span is not None:
            lines.append(f"  --> line {span.line}, column {span.column}")
        lines.extend(f"  = {key}: {value}" for key, value in self._notes(diagnostic))
        return "\n".join(lines)

    def _json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        span = diagnostic.span
        if span is not None:
            data |= {"line": span.line, "column": span.column, "start": span.start, "end": span.end}
        for key, value in self._notes(diagnostic):
            data["hint" if key == "help" else key] = value
        return json.dumps(data, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return f"{text[: self.max_content_length]}..."
