"""Enumerations for numaffix type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class AffixTokenType(StrEnum):
    """Kind of token produced by the affix pattern tokenizer.

    StrEnum provides automatic string conversion: str(AffixTokenType.PERCENT) == "percent"
    """

    LITERAL = "literal"
    """Run of literal text (unquoted non-placeholder or quoted content)"""

    PLUS_SIGN = "plus_sign"
    """Unquoted + placeholder"""

    MINUS_SIGN = "minus_sign"
    """Unquoted - placeholder"""

    PERCENT = "percent"
    """Unquoted % placeholder"""

    PERMILLE = "permille"
    """Unquoted ‰ placeholder"""

    CURRENCY_SYMBOL = "currency_symbol"
    """Single ¤: localized currency symbol"""

    CURRENCY_CODE = "currency_code"
    """Double ¤¤: ISO 4217 code"""

    CURRENCY_NAME = "currency_name"
    """Triple ¤¤¤: long currency display name"""


class AffixSlot(StrEnum):
    """One of the four affix positions resolved per configuration.

    StrEnum members are strings: str(AffixSlot.POSITIVE_PREFIX) == "positive_prefix"
    """

    POSITIVE_PREFIX = "positive_prefix"
    POSITIVE_SUFFIX = "positive_suffix"
    NEGATIVE_PREFIX = "negative_prefix"
    NEGATIVE_SUFFIX = "negative_suffix"


CURRENCY_TOKEN_TYPES: frozenset[AffixTokenType] = frozenset(
    {
        AffixTokenType.CURRENCY_SYMBOL,
        AffixTokenType.CURRENCY_CODE,
        AffixTokenType.CURRENCY_NAME,
    }
)

__all__ = [
    "CURRENCY_TOKEN_TYPES",
    "AffixSlot",
    "AffixTokenType",
]
