"""Quickstart example for numaffix.

This example demonstrates resolving number affixes from literal strings and
affix patterns, then wrapping formatted digits with the resolved modifiers.

Note: Examples 4 and 5 need locale data (pip install numaffix[babel]).
"""

from decimal import Decimal

from numaffix import (
    AffixResolver,
    AffixSpec,
    ModifierHolder,
    PatternSyntaxError,
    SymbolTable,
    escape,
    resolve,
)

# Example 1: Defaults
print("=" * 50)
print("Example 1: Defaults")
print("=" * 50)

result = resolve(AffixSpec(), SymbolTable())
print(f"positive: {result.positive}")
print(f"negative: {result.negative}")
# Output: positive: AffixPair(prefix='', suffix='')
# Output: negative: AffixPair(prefix='-', suffix='')

# Example 2: Patterns vs literals
print("\n" + "=" * 50)
print("Example 2: Patterns vs Literals")
print("=" * 50)

arabic_percent = SymbolTable(percent_sign="٪")
for spec in (
    AffixSpec(positive_suffix_pattern="%"),  # placeholder, substituted
    AffixSpec(positive_suffix_pattern="'%'"),  # quoted, copied literally
    AffixSpec(positive_suffix="%"),  # literal field, never parsed
):
    print(f"{spec.positive_suffix_pattern or spec.positive_suffix!r:>6} -> "
          f"{resolve(spec, arabic_percent).positive.suffix!r}")

print(f"escape('50%') -> {escape('50%')!r}")

# Example 3: Accounting style and the plus sign
print("\n" + "=" * 50)
print("Example 3: Accounting Style and Always-Show-Plus")
print("=" * 50)

accounting = AffixSpec(negative_prefix_pattern="(", negative_suffix_pattern=")")
resolver = AffixResolver()
holder = ModifierHolder()
for value in (Decimal("1234.50"), Decimal("-1234.50"), -0.0):
    holder.clear()
    resolver.apply(value, holder, SymbolTable(), accounting)
    print(f"{value!s:>9} -> {holder.apply_all(str(abs(value)))}")

signed = AffixSpec(negative_suffix_pattern="-", always_show_plus_sign=True)
result = resolver.resolve(signed, SymbolTable())
print(f"suffix-sign style: positive={result.positive} negative={result.negative}")
# Output: suffix-sign style: positive=AffixPair(prefix='', suffix='+') ...

# Example 4: Locale symbols
print("\n" + "=" * 50)
print("Example 4: Locale Symbols (Babel)")
print("=" * 50)

currency_spec = AffixSpec(positive_prefix_pattern="¤ ", negative_prefix_pattern="-¤ ")
for locale_code, currency in (("en_US", "USD"), ("de_CH", "CHF"), ("sv_SE", "SEK")):
    table = SymbolTable.from_locale(locale_code, currency=currency)
    result = resolver.resolve(currency_spec, table)
    print(f"{locale_code}: {result.positive.prefix!r} / {result.negative.prefix!r}")

print(f"parse_count: {resolver.parse_count}")
print(f"cache_info: {resolver.cache_info()}")

# Example 5: Errors
print("\n" + "=" * 50)
print("Example 5: Pattern Errors")
print("=" * 50)

try:
    resolve(AffixSpec(negative_suffix_pattern="x'oops"), SymbolTable())
except PatternSyntaxError as e:
    print(e)
    print(f"[pattern={e.pattern!r} offset={e.offset}]")

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
