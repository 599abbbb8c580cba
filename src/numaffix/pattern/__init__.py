"""Affix pattern scanning and symbol substitution.

Python 3.13+.
"""

from .cursor import Cursor
from .substitutor import (
    AffixToken,
    contains_type,
    escape,
    has_currency_symbols,
    substitute,
    tokenize,
)

__all__ = [
    "AffixToken",
    "Cursor",
    "contains_type",
    "escape",
    "has_currency_symbols",
    "substitute",
    "tokenize",
]
