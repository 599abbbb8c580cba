"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all Babel-dependent modules.

Design Rationale:
    numaffix supports two installation modes:
    - Core: `pip install numaffix` (no external dependencies; callers
      supply their own SymbolTable)
    - Locale data: `pip install numaffix[babel]` (SymbolTable.from_locale)

    This module ensures that:
    1. Core installations never trigger Babel imports
    2. Locale-aware entry points get consistent, helpful error messages when
       Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from numaffix.core.babel_compat import require_babel

    def my_function(locale_code: str) -> None:
        require_babel("my_function")  # Raises ImportError if Babel missing
        from babel import Locale  # Safe to import Babel now
        ...

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelNumbersProtocol(Protocol):
    """Protocol for Babel numbers module interface.

    Defines the subset of babel.numbers API actually used by numaffix.
    Provides type safety without requiring full Babel type stubs.
    """

    def get_plus_sign_symbol(self, locale: Locale | str | None = None) -> str:
        """Return the locale's plus sign."""
        ...

    def get_minus_sign_symbol(self, locale: Locale | str | None = None) -> str:
        """Return the locale's minus sign."""
        ...

    def get_currency_symbol(self, currency: str, locale: Locale | str | None = None) -> str:
        """Return the localized symbol for an ISO 4217 currency code."""
        ...

    def get_currency_name(
        self,
        currency: str,
        count: float | Decimal | None = None,
        locale: Locale | str | None = None,
    ) -> str:
        """Return the localized display name for an ISO 4217 currency code."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_numbers",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install numaffix[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the Babel numbers module (typed via BabelNumbersProtocol).

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers
