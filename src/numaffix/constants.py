"""Shared constants for numaffix.

Centralizes the affix pattern alphabet and the cache/locale defaults used
by the symbol table, substitutor, and resolver. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Pattern alphabet: Quote and placeholder characters (UTS #35 section 3.2)
- Symbol defaults: Root-locale texts used when no locale data is supplied
- Cache limits: Memory bounds for caching subsystems
- Locale defaults: Fallback locale for unknown identifiers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern alphabet
    "QUOTE",
    "PLUS_SIGN_PLACEHOLDER",
    "MINUS_SIGN_PLACEHOLDER",
    "PERCENT_PLACEHOLDER",
    "PERMILLE_PLACEHOLDER",
    "CURRENCY_PLACEHOLDER",
    "PLACEHOLDER_CHARS",
    # Symbol defaults
    "DEFAULT_PLUS_SIGN",
    "DEFAULT_MINUS_SIGN",
    "DEFAULT_PERCENT_SIGN",
    "DEFAULT_PERMILLE_SIGN",
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_CURRENCY_CODE",
    # Cache limits
    "DEFAULT_PATTERN_CACHE_SIZE",
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "FALLBACK_LOCALE",
]

# ============================================================================
# PATTERN ALPHABET
# ============================================================================

# Toggles quoted (literal) mode; doubled inside quotes to emit one quote.
QUOTE: str = "'"

PLUS_SIGN_PLACEHOLDER: str = "+"
MINUS_SIGN_PLACEHOLDER: str = "-"
PERCENT_PLACEHOLDER: str = "%"
PERMILLE_PLACEHOLDER: str = "‰"  # PER MILLE SIGN
CURRENCY_PLACEHOLDER: str = "¤"  # CURRENCY SIGN

PLACEHOLDER_CHARS: frozenset[str] = frozenset(
    {
        PLUS_SIGN_PLACEHOLDER,
        MINUS_SIGN_PLACEHOLDER,
        PERCENT_PLACEHOLDER,
        PERMILLE_PLACEHOLDER,
        CURRENCY_PLACEHOLDER,
    }
)

# ============================================================================
# SYMBOL DEFAULTS
# ============================================================================

# CLDR root-locale values. XXX is the ISO 4217 "no currency" code.
DEFAULT_PLUS_SIGN: str = "+"
DEFAULT_MINUS_SIGN: str = "-"
DEFAULT_PERCENT_SIGN: str = "%"
DEFAULT_PERMILLE_SIGN: str = "‰"
DEFAULT_CURRENCY_SYMBOL: str = "¤"
DEFAULT_CURRENCY_CODE: str = "XXX"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Default maximum memoized (pattern, symbols) substitutions per resolver.
# A formatter touches at most four patterns per configuration, so 128
# covers dozens of configurations alternating on one worker.
DEFAULT_PATTERN_CACHE_SIZE: int = 128

# Maximum cached Babel-derived SymbolTable instances.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

FALLBACK_LOCALE: str = "en_US"
