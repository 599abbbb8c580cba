"""Locale symbol table consumed by affix pattern substitution.

SymbolTable is an immutable, hashable value object holding the literal
texts that pattern placeholders expand to. Callers either construct one
directly (no external dependencies) or build one from CLDR data through
Babel with SymbolTable.from_locale().

Design Principles:
    - Immutable by default (frozen dataclass)
    - Value equality, so resolver caches key on content rather than identity
    - Explicit error handling for strict construction, logged fallback otherwise

Python 3.13+. Babel is optional (required only by the locale factories).
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from numaffix.constants import (
    DEFAULT_CURRENCY_CODE,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_MINUS_SIGN,
    DEFAULT_PERCENT_SIGN,
    DEFAULT_PERMILLE_SIGN,
    DEFAULT_PLUS_SIGN,
    FALLBACK_LOCALE,
    MAX_LOCALE_CACHE_SIZE,
)
from numaffix.core.babel_compat import (
    get_babel_numbers,
    get_unknown_locale_error,
    require_babel,
)
from numaffix.diagnostics import ErrorTemplate
from numaffix.enums import AffixTokenType
from numaffix.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["SymbolTable"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SymbolTable:
    """Immutable texts substituted for affix pattern placeholders.

    Attributes:
        plus_sign: Text for the + placeholder
        minus_sign: Text for the - placeholder
        percent_sign: Text for the % placeholder
        permille_sign: Text for the ‰ placeholder
        currency_symbol: Text for a single ¤ (and runs of four or more)
        currency_code: Text for ¤¤ (ISO 4217 code)
        currency_name: Text for ¤¤¤ (long display name)
        locale_code: Locale the table was built for (metadata, not compared)
        is_fallback: True if from_locale() fell back to en_US (not compared)

    Examples:
        >>> SymbolTable().minus_sign
        '-'
        >>> SymbolTable(minus_sign="\\u2212") == SymbolTable(minus_sign="\\u2212")
        True
    """

    plus_sign: str = DEFAULT_PLUS_SIGN
    minus_sign: str = DEFAULT_MINUS_SIGN
    percent_sign: str = DEFAULT_PERCENT_SIGN
    permille_sign: str = DEFAULT_PERMILLE_SIGN
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    currency_code: str = DEFAULT_CURRENCY_CODE
    currency_name: str = DEFAULT_CURRENCY_SYMBOL
    locale_code: str = field(default="", compare=False)
    is_fallback: bool = field(default=False, compare=False)

    def text_for(self, token_type: AffixTokenType) -> str:
        """Return the text a placeholder token expands to.

        Raises:
            ValueError: If token_type is LITERAL (literals carry their own text)
        """
        match token_type:
            case AffixTokenType.PLUS_SIGN:
                return self.plus_sign
            case AffixTokenType.MINUS_SIGN:
                return self.minus_sign
            case AffixTokenType.PERCENT:
                return self.percent_sign
            case AffixTokenType.PERMILLE:
                return self.permille_sign
            case AffixTokenType.CURRENCY_SYMBOL:
                return self.currency_symbol
            case AffixTokenType.CURRENCY_CODE:
                return self.currency_code
            case AffixTokenType.CURRENCY_NAME:
                return self.currency_name
            case _:
                msg = f"{token_type} has no symbol table entry"
                raise ValueError(msg)

    @classmethod
    def from_locale(cls, locale_code: str, currency: str | None = None) -> SymbolTable:
        """Build a SymbolTable from CLDR data, falling back to en_US.

        For unknown or malformed locales, logs a warning and uses en_US
        symbols while preserving the original locale_code. Results are
        cached per (locale_code, currency).

        Args:
            locale_code: BCP 47 or POSIX locale identifier (e.g., 'de-CH')
            currency: ISO 4217 code for the currency placeholders (optional)

        Returns:
            SymbolTable for the locale

        Raises:
            BabelImportError: If Babel is not installed

        Examples:
            >>> SymbolTable.from_locale("de-CH", currency="CHF").currency_code
            'CHF'
            >>> SymbolTable.from_locale("xx_UNKNOWN").is_fallback
            True
        """
        require_babel("SymbolTable.from_locale")
        return _cached_from_locale(locale_code, currency)

    @classmethod
    def from_locale_or_raise(cls, locale_code: str, currency: str | None = None) -> SymbolTable:
        """Build a SymbolTable from CLDR data or raise on an unknown locale.

        Raises:
            BabelImportError: If Babel is not installed
            ValueError: If locale code is invalid or unknown
        """
        require_babel("SymbolTable.from_locale_or_raise")
        unknown_locale_error = get_unknown_locale_error()
        try:
            babel_locale = get_babel_locale(locale_code)
        except (unknown_locale_error, ValueError) as e:
            diagnostic = ErrorTemplate.locale_unknown(locale_code, str(e))
            raise ValueError(diagnostic.message) from None
        return _build(babel_locale, locale_code, currency, is_fallback=False)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _cached_from_locale(locale_code: str, currency: str | None) -> SymbolTable:
    unknown_locale_error = get_unknown_locale_error()
    used_fallback = False
    try:
        babel_locale = get_babel_locale(locale_code)
    except unknown_locale_error as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
        )
        babel_locale = get_babel_locale(FALLBACK_LOCALE)
        used_fallback = True
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, FALLBACK_LOCALE
        )
        babel_locale = get_babel_locale(FALLBACK_LOCALE)
        used_fallback = True
    return _build(babel_locale, locale_code, currency, is_fallback=used_fallback)


def _latin_number_symbols(babel_locale: Locale) -> Any:
    # Babel 2.14+ keys number_symbols by numbering system.
    symbols = babel_locale.number_symbols
    nested = symbols.get("latn")
    return nested if nested is not None else symbols


def _build(
    babel_locale: Locale, locale_code: str, currency: str | None, *, is_fallback: bool
) -> SymbolTable:
    numbers = get_babel_numbers()
    number_symbols = _latin_number_symbols(babel_locale)

    currency_symbol = DEFAULT_CURRENCY_SYMBOL
    currency_code = DEFAULT_CURRENCY_CODE
    currency_name = DEFAULT_CURRENCY_SYMBOL
    if currency is not None:
        currency_code = currency.upper()
        currency_symbol = numbers.get_currency_symbol(currency_code, locale=babel_locale)
        currency_name = numbers.get_currency_name(currency_code, locale=babel_locale)
        if currency_symbol == currency_code:
            logger.debug(
                "No localized symbol for currency %s in locale %s", currency_code, locale_code
            )

    return SymbolTable(
        plus_sign=numbers.get_plus_sign_symbol(babel_locale),
        minus_sign=numbers.get_minus_sign_symbol(babel_locale),
        percent_sign=number_symbols.get("percentSign", DEFAULT_PERCENT_SIGN),
        permille_sign=number_symbols.get("perMille", DEFAULT_PERMILLE_SIGN),
        currency_symbol=currency_symbol,
        currency_code=currency_code,
        currency_name=currency_name,
        locale_code=locale_code,
        is_fallback=is_fallback,
    )

