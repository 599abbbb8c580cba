"""Diagnostic system for affix errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import AffixError, PatternSyntaxError
from .formatter import DiagnosticFormatter
from .templates import ErrorTemplate

__all__ = [
    "AffixError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "PatternSyntaxError",
    "SourceSpan",
]
