"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization so symbol-table cache keys and
Babel lookups agree on one canonical form.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from numaffix.constants import MAX_LOCALE_CACHE_SIZE
from numaffix.core.babel_compat import get_locale_class

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.territory
        'US'
    """
    return get_locale_class().parse(normalize_locale(locale_code))
