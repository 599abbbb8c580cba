"""numaffix - Positive/negative affix resolution for number formatting.

Resolves the literal prefix and suffix a number formatter attaches to
positive and negative numbers. Affixes are declared as literal strings or
as UTS #35 affix patterns whose placeholders (+ - % ‰ ¤) expand to
locale symbols.

Public API:
    AffixSpec - Immutable snapshot of the eight affix fields and plus-sign flag
    SymbolTable - Locale symbol texts (Babel-backed factory: from_locale)
    AffixResolver - Per-worker resolver with result caching
    ResolverConfig - Resolver cache configuration
    ResolvedResult - Resolved positive and negative AffixPairs
    AffixModifier / PositiveNegativeAffixModifier - Pipeline decorators
    ModifierHolder - Ordered modifier collection
    resolve, get_modifier, apply - Module-level entry points
    substitute, escape - Pattern <-> literal conversion

Exceptions:
    AffixError - Base exception class
    PatternSyntaxError - Unterminated quote in an affix pattern

Submodules:
    numaffix.pattern - Tokenizer and substitutor
    numaffix.diagnostics - Error types, codes and formatting
"""

from .diagnostics import AffixError, PatternSyntaxError
from .modifiers import (
    AffixModifier,
    AffixPair,
    ModifierHolder,
    PositiveNegativeAffixModifier,
    is_negative,
)
from .pattern import escape, substitute
from .resolver import (
    AffixResolver,
    ResolvedResult,
    ResolverConfig,
    apply,
    get_modifier,
    resolve,
)
from .spec import AffixSpec
from .symbols import SymbolTable

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("numaffix")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AffixError",
    "AffixModifier",
    "AffixPair",
    "AffixResolver",
    "AffixSpec",
    "ModifierHolder",
    "PatternSyntaxError",
    "PositiveNegativeAffixModifier",
    "ResolvedResult",
    "ResolverConfig",
    "SymbolTable",
    "__version__",
    "apply",
    "escape",
    "get_modifier",
    "is_negative",
    "resolve",
    "substitute",
]
