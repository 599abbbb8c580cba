"""Affix resolution: from declarations and locale symbols to modifiers.

Resolves the four affix slots of an AffixSpec against a SymbolTable and
exposes the result as positive/negative modifiers for the formatting
pipeline.

Per-slot precedence (first match wins):
    1. Literal field set      -> used verbatim, pattern never parsed
    2. Pattern field set      -> symbol substitution
    3. Neither                -> "" for every slot except the negative
                                 prefix, which defaults to the minus sign
                                 unless the resolved negative suffix
                                 already carries it

The plus-sign policy runs after both pairs are resolved: the plus sign is
placed in the positive pair where the minus sign sits in the negative
pair, or prepended to the positive prefix if the negative pair has none.

Architecture:
    - AffixResolver: Per-worker resolver holding the most recent result
      and a bounded memo of pattern substitutions
    - ResolverConfig: Immutable cache configuration
    - resolve() / get_modifier() / apply(): Module-level entry points that
      accept an explicit resolver (or use a throwaway one)

Thread Safety:
    AffixResolver is NOT shared between threads. Give each worker its own
    instance and pass it explicitly; there is no thread-local or global
    state. ResolvedResult, AffixSpec and SymbolTable are immutable and may
    cross threads freely.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal
from numbers import Real

from numaffix.constants import DEFAULT_PATTERN_CACHE_SIZE
from numaffix.enums import AffixSlot
from numaffix.modifiers import (
    AffixModifier,
    AffixPair,
    ModifierSink,
    PositiveNegativeAffixModifier,
)
from numaffix.pattern.substitutor import substitute
from numaffix.spec import AffixProperties, AffixSpec
from numaffix.symbols import SymbolTable

__all__ = [
    "AffixResolver",
    "ResolvedResult",
    "ResolverConfig",
    "apply",
    "get_modifier",
    "resolve",
]

logger = logging.getLogger(__name__)

type _ResultKey = tuple[SymbolTable, AffixSpec]
type _PatternKey = tuple[str, SymbolTable]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable cache configuration for AffixResolver.

    Attributes:
        pattern_cache_size: Maximum memoized (pattern, symbols)
            substitutions (default: 128). 0 disables the memo; the
            most-recent-result cache is always on.

    Example:
        >>> resolver = AffixResolver(ResolverConfig(pattern_cache_size=0))
        >>> resolver.cache_info()["pattern_cache_maxsize"]
        0
    """

    pattern_cache_size: int = DEFAULT_PATTERN_CACHE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If pattern_cache_size is negative.
        """
        if self.pattern_cache_size < 0:
            msg = "pattern_cache_size must be non-negative"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ResolvedResult:
    """Resolved affixes for both signs.

    Never contains pattern syntax; all four strings are final text.

    Attributes:
        positive: (prefix, suffix) for positive numbers and zero
        negative: (prefix, suffix) for negative numbers and negative zero
        modifier: Modifier pair built from the two AffixPairs
    """

    positive: AffixPair
    negative: AffixPair
    modifier: PositiveNegativeAffixModifier = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Build the modifier pair once; the result is immutable afterwards."""
        object.__setattr__(
            self,
            "modifier",
            PositiveNegativeAffixModifier(
                positive=AffixModifier.from_pair(self.positive),
                negative=AffixModifier.from_pair(self.negative),
            ),
        )


class AffixResolver:
    """Per-worker affix resolver with result caching.

    Caches the most recent ResolvedResult keyed by value equality of
    (symbols, spec). A repeated call with unchanged inputs returns the
    cached result without touching the substitutor. A call with different
    inputs recomputes and replaces the entry. A call that raises leaves
    the cache as it was.

    Attributes:
        parse_count: Number of pattern substitutions actually performed

    Example:
        >>> resolver = AffixResolver()
        >>> spec = AffixSpec(positive_suffix_pattern="%", negative_suffix_pattern="%")
        >>> result = resolver.resolve(spec, SymbolTable())
        >>> result.negative
        AffixPair(prefix='-', suffix='%')
        >>> resolver.resolve(spec, SymbolTable()) is result
        True
        >>> resolver.parse_count
        1
    """

    __slots__ = (
        "_config",
        "_hits",
        "_last_key",
        "_last_result",
        "_misses",
        "_parse_count",
        "_pattern_cache",
    )

    def __init__(self, config: ResolverConfig | None = None) -> None:
        """Initialize resolver.

        Args:
            config: Cache configuration (default: ResolverConfig())
        """
        self._config = config if config is not None else ResolverConfig()
        self._last_key: _ResultKey | None = None
        self._last_result: ResolvedResult | None = None
        self._pattern_cache: OrderedDict[_PatternKey, str] = OrderedDict()
        self._hits = 0
        self._misses = 0
        self._parse_count = 0

    @property
    def config(self) -> ResolverConfig:
        """Cache configuration (read-only)."""
        return self._config

    @property
    def parse_count(self) -> int:
        """Number of pattern substitutions performed (memo hits excluded)."""
        return self._parse_count

    def resolve(self, spec: AffixSpec | AffixProperties, symbols: SymbolTable) -> ResolvedResult:
        """Resolve an affix declaration against a symbol table.

        Args:
            spec: AffixSpec snapshot, or a property source to snapshot now
            symbols: Locale symbol texts

        Returns:
            Cached or newly computed ResolvedResult

        Raises:
            PatternSyntaxError: If a pattern that must be parsed has an
                unterminated quote
        """
        if not isinstance(spec, AffixSpec):
            spec = AffixSpec.from_properties(spec)

        key: _ResultKey = (symbols, spec)
        cached = self._last_result
        if cached is not None and self._last_key == key:
            self._hits += 1
            logger.debug("Affix cache hit")
            return cached

        self._misses += 1
        logger.debug("Affix cache miss, resolving %r", spec)
        result = self._compute(spec, symbols)
        self._last_key = key
        self._last_result = result
        return result

    def get_modifier(
        self, spec: AffixSpec | AffixProperties, symbols: SymbolTable
    ) -> PositiveNegativeAffixModifier:
        """Resolve and return the positive/negative modifier pair."""
        return self.resolve(spec, symbols).modifier

    def apply(
        self,
        value: int | float | Decimal | Real,
        holder: ModifierSink,
        symbols: SymbolTable,
        spec: AffixSpec | AffixProperties,
    ) -> None:
        """Append the modifier matching the sign of value to holder.

        Negative zero selects the negative modifier.

        Raises:
            PatternSyntaxError: If resolution fails (holder is left unchanged)
        """
        self.resolve(spec, symbols).modifier.apply(value, holder)

    def clear_cache(self) -> None:
        """Drop the cached result and the pattern memo (counters are kept)."""
        self._last_key = None
        self._last_result = None
        self._pattern_cache.clear()

    def cache_info(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with:
            - hits: Resolutions answered from the cached result
            - misses: Resolutions that were computed
            - parse_count: Pattern substitutions performed
            - pattern_cache_size: Current memoized substitutions
            - pattern_cache_maxsize: Configured memo bound
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "parse_count": self._parse_count,
            "pattern_cache_size": len(self._pattern_cache),
            "pattern_cache_maxsize": self._config.pattern_cache_size,
        }

    def _compute(self, spec: AffixSpec, symbols: SymbolTable) -> ResolvedResult:
        positive_prefix = self._resolve_slot(spec, AffixSlot.POSITIVE_PREFIX, symbols)
        positive_suffix = self._resolve_slot(spec, AffixSlot.POSITIVE_SUFFIX, symbols)
        negative_prefix = self._resolve_slot(spec, AffixSlot.NEGATIVE_PREFIX, symbols)
        negative_suffix = self._resolve_slot(spec, AffixSlot.NEGATIVE_SUFFIX, symbols)

        if negative_suffix is None:
            negative_suffix = ""
        if negative_prefix is None:
            minus = symbols.minus_sign
            # Sign already placed by the suffix (e.g. "#;#-"): nothing to prepend.
            negative_prefix = "" if minus and minus in negative_suffix else minus

        positive = AffixPair(positive_prefix or "", positive_suffix or "")
        negative = AffixPair(negative_prefix, negative_suffix)

        if spec.always_show_plus_sign:
            positive = _with_plus_sign(positive, negative, symbols)

        return ResolvedResult(positive=positive, negative=negative)

    def _resolve_slot(self, spec: AffixSpec, slot: AffixSlot, symbols: SymbolTable) -> str | None:
        literal = spec.literal_for(slot)
        if literal is not None:
            return literal
        pattern = spec.pattern_for(slot)
        if pattern is not None:
            return self._substitute(pattern, symbols)
        return None

    def _substitute(self, pattern: str, symbols: SymbolTable) -> str:
        maxsize = self._config.pattern_cache_size
        key: _PatternKey = (pattern, symbols)
        if maxsize:
            cached = self._pattern_cache.get(key)
            if cached is not None:
                self._pattern_cache.move_to_end(key)
                return cached

        self._parse_count += 1
        text = substitute(pattern, symbols)
        logger.debug("Substituted affix pattern %r -> %r", pattern, text)

        if maxsize:
            self._pattern_cache[key] = text
            if len(self._pattern_cache) > maxsize:
                self._pattern_cache.popitem(last=False)
        return text


def _with_plus_sign(positive: AffixPair, negative: AffixPair, symbols: SymbolTable) -> AffixPair:
    """Place the plus sign where the minus sign sits in the negative pair.

    A positive affix that already contains a plus sign gets a second one.
    """
    plus = symbols.plus_sign
    minus = symbols.minus_sign
    if minus:
        offset = negative.prefix.find(minus)
        if offset >= 0:
            return AffixPair(_insert(positive.prefix, offset, plus), positive.suffix)
        offset = negative.suffix.find(minus)
        if offset >= 0:
            return AffixPair(positive.prefix, _insert(positive.suffix, offset, plus))
    return AffixPair(plus + positive.prefix, positive.suffix)


def _insert(text: str, offset: int, insertion: str) -> str:
    offset = min(offset, len(text))
    return f"{text[:offset]}{insertion}{text[offset:]}"


def resolve(
    spec: AffixSpec | AffixProperties,
    symbols: SymbolTable,
    *,
    resolver: AffixResolver | None = None,
) -> ResolvedResult:
    """Resolve affixes, using the caller's per-worker resolver if given.

    Without a resolver a fresh one is created, so nothing is cached across
    calls.

    Examples:
        >>> resolve(AffixSpec(), SymbolTable()).negative.prefix
        '-'
        >>> resolve(AffixSpec(always_show_plus_sign=True), SymbolTable()).positive.prefix
        '+'
    """
    return (resolver if resolver is not None else AffixResolver()).resolve(spec, symbols)


def get_modifier(
    spec: AffixSpec | AffixProperties,
    symbols: SymbolTable,
    *,
    resolver: AffixResolver | None = None,
) -> PositiveNegativeAffixModifier:
    """Resolve affixes and return the positive/negative modifier pair."""
    return resolve(spec, symbols, resolver=resolver).modifier


def apply(
    value: int | float | Decimal | Real,
    holder: ModifierSink,
    symbols: SymbolTable,
    spec: AffixSpec | AffixProperties,
    *,
    resolver: AffixResolver | None = None,
) -> None:
    """Append the modifier matching the sign of value to holder.

    Example:
        >>> holder = []
        >>> apply(-0.0, holder, SymbolTable(), AffixSpec())
        >>> holder[0].apply("0")
        '-0'
    """
    resolve(spec, symbols, resolver=resolver).modifier.apply(value, holder)
