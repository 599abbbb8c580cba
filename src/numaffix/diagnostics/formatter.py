"""Diagnostic formatting service.

Renders diagnostics in Rust compiler style for exception messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["DiagnosticFormatter"]


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Example:
        >>> print(DiagnosticFormatter().format(ErrorTemplate.locale_unknown("xx")))
        error[LOCALE_UNKNOWN]: Unknown locale identifier 'xx'
          = help: Use a BCP 47 or POSIX identifier such as 'en-US' or 'de_DE'
    """

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic."""
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"
        parts = [f"{severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.span:
            parts.append(f"  --> offset {diagnostic.span.start}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)
