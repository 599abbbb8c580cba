"""Affix exception hierarchy with structured diagnostics.

All exceptions may carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = ["AffixError", "PatternSyntaxError"]


class AffixError(Exception):
    """Base exception for all affix errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize AffixError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PatternSyntaxError(AffixError):
    """Affix pattern has a quoted section that is never closed.

    This is the only failure mode of pattern substitution. It propagates
    to the caller of resolve()/apply() and never populates a cache.

    Attributes:
        pattern: The offending affix pattern
        offset: Character offset of the unterminated opening quote

    Example:
        >>> substitute("'abc", SymbolTable())
        Traceback (most recent call last):
        ...
        PatternSyntaxError: error[UNTERMINATED_QUOTE]: ...
    """

    def __init__(self, message: str | Diagnostic, *, pattern: str, offset: int) -> None:
        """Initialize PatternSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            pattern: The offending affix pattern
            offset: Character offset of the unterminated opening quote
        """
        super().__init__(message)
        self.pattern = pattern
        self.offset = offset
