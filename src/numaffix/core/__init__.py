"""Core utilities shared by the symbol, pattern, and resolver layers.

Exports:
    BabelImportError: Raised when a locale-aware feature needs Babel
    is_babel_available: Check whether Babel can be imported
    require_babel: Fail fast when Babel is missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
