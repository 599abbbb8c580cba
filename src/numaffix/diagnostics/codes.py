"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern syntax errors (affix pattern scanning)
        2000-2999: Locale errors (symbol table construction)
    """

    # Pattern syntax errors (1000-1999)
    UNTERMINATED_QUOTE = 1001

    # Locale errors (2000-2999)
    LOCALE_UNKNOWN = 2001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a diagnostic inside an affix pattern.

    Affix patterns are single-line, so only character offsets are tracked.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Pattern location (None for non-syntax errors)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNTERMINATED_QUOTE]: Unterminated quote in affix pattern "'abc"
              --> offset 0
              = help: Close the quoted section with ' or write '' for a literal quote

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
