"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    # UTS #35 section describing affix pattern quoting and special characters
    _DOCS_BASE = "https://unicode.org/reports/tr35/tr35-numbers.html"

    @staticmethod
    def unterminated_quote(pattern: str, offset: int) -> Diagnostic:
        """Affix pattern ends while a quoted section is still open.

        Args:
            pattern: The offending affix pattern
            offset: Character offset of the opening quote

        Returns:
            Diagnostic for UNTERMINATED_QUOTE
        """
        msg = f"Unterminated quote in affix pattern {pattern!r} at offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_QUOTE,
            message=msg,
            span=SourceSpan(start=offset, end=len(pattern)),
            hint="Close the quoted section with ' or write '' for a literal quote",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Special_Pattern_Characters",
        )

    @staticmethod
    def locale_unknown(locale_code: str, detail: str | None = None) -> Diagnostic:
        """Locale identifier not recognized by CLDR.

        Args:
            locale_code: The locale code that could not be loaded
            detail: Reason reported by the locale loader (optional)

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale identifier '{locale_code}'"
        if detail:
            msg = f"{msg}: {detail}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            span=None,
            hint="Use a BCP 47 or POSIX identifier such as 'en-US' or 'de_DE'",
        )
