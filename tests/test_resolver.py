"""Tests for affix resolution semantics.

Covers per-slot precedence (literal, pattern, default), the negative prefix
default, the plus-sign policy, sign dispatch in apply() and error
propagation.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from numaffix import (
    AffixModifier,
    AffixPair,
    AffixResolver,
    AffixSpec,
    ModifierHolder,
    PatternSyntaxError,
    SymbolTable,
    apply,
    get_modifier,
    resolve,
)

# ============================================================================
# PRECEDENCE
# ============================================================================


class TestSlotPrecedence:
    """Literal beats pattern beats default, per slot."""

    def test_all_unset_defaults(self, symbols: SymbolTable) -> None:
        """Only the negative prefix has a non-empty default (the minus sign)."""
        result = resolve(AffixSpec(), symbols)

        assert result.positive == ("", "")
        assert result.negative == ("<minus>", "")

    def test_literal_used_verbatim(self, symbols: SymbolTable) -> None:
        """Literal fields are not interpreted as patterns."""
        result = resolve(AffixSpec(positive_suffix="%", negative_prefix="'-'"), symbols)

        assert result.positive.suffix == "%"
        assert result.negative.prefix == "'-'"

    def test_literal_shadows_broken_pattern(self, symbols: SymbolTable) -> None:
        """A literal next to an unterminated pattern wins and nothing is parsed."""
        resolver = AffixResolver()
        spec = AffixSpec(negative_prefix="X", negative_prefix_pattern="'oops")

        result = resolver.resolve(spec, symbols)

        assert result.negative.prefix == "X"
        assert resolver.parse_count == 0

    def test_pattern_substituted(self, symbols: SymbolTable) -> None:
        """Pattern fields expand placeholders."""
        spec = AffixSpec(
            positive_prefix_pattern="¤ ",
            negative_prefix_pattern="(¤ ",
            negative_suffix_pattern=")",
        )

        result = resolve(spec, symbols)

        assert result.positive == ("<cur> ", "")
        assert result.negative == ("(<cur> ", ")")

    def test_empty_pattern_is_set(self, symbols: SymbolTable) -> None:
        """An empty negative prefix pattern yields "" rather than the minus sign."""
        result = resolve(AffixSpec(negative_prefix_pattern=""), symbols)

        assert result.negative.prefix == ""

    def test_percent_placeholder_vs_quoted(
        self, symbols: SymbolTable, root_symbols: SymbolTable
    ) -> None:
        """"%" is substituted, "'%'" is copied literally."""
        plain = AffixSpec(positive_suffix_pattern="%")
        quoted = AffixSpec(positive_suffix_pattern="'%'")

        assert resolve(plain, symbols).positive.suffix == "<pct>"
        assert resolve(quoted, symbols).positive.suffix == "%"
        assert resolve(plain, root_symbols).positive.suffix == "%"
        assert resolve(quoted, root_symbols).positive.suffix == "%"

    def test_property_source_snapshotted(self, symbols: SymbolTable) -> None:
        """Non-AffixSpec sources are snapshotted before resolving."""

        class Props:
            negative_prefix_pattern = "("
            negative_suffix_pattern = ")"

        result = resolve(Props(), symbols)

        assert result.negative == ("(", ")")


# ============================================================================
# NEGATIVE PREFIX DEFAULT
# ============================================================================


class TestNegativePrefixDefault:
    """The minus sign is prepended unless the negative suffix carries it."""

    def test_suffix_pattern_with_minus(self, symbols: SymbolTable) -> None:
        """A negative suffix containing the minus sign suppresses the default."""
        result = resolve(AffixSpec(negative_suffix_pattern="-"), symbols)

        assert result.negative == ("", "<minus>")

    def test_suffix_literal_with_minus(self, symbols: SymbolTable) -> None:
        """Detection uses the resolved suffix text, literal or substituted."""
        result = resolve(AffixSpec(negative_suffix=" <minus>"), symbols)

        assert result.negative == ("", " <minus>")

    def test_suffix_without_minus(self, symbols: SymbolTable) -> None:
        """A suffix without the minus sign keeps the default prefix."""
        result = resolve(AffixSpec(negative_suffix_pattern="%"), symbols)

        assert result.negative == ("<minus>", "<pct>")

    def test_quoted_hyphen_is_not_minus_text(self, symbols: SymbolTable) -> None:
        """A quoted hyphen is only the minus sign if the locale says so."""
        result = resolve(AffixSpec(negative_suffix_pattern="'-'"), symbols)

        assert result.negative == ("<minus>", "-")

    def test_quoted_hyphen_matches_root_minus(self, root_symbols: SymbolTable) -> None:
        """With root symbols a literal hyphen in the suffix is the minus sign."""
        result = resolve(AffixSpec(negative_suffix_pattern="'-'"), root_symbols)

        assert result.negative == ("", "-")

    def test_explicit_prefix_kept(self, symbols: SymbolTable) -> None:
        """A set negative prefix is never replaced."""
        spec = AffixSpec(negative_prefix="(", negative_suffix_pattern="-")

        assert resolve(spec, symbols).negative == ("(", "<minus>")


# ============================================================================
# PLUS SIGN POLICY
# ============================================================================


class TestAlwaysShowPlusSign:
    """The plus sign mirrors the minus sign position in the positive pair."""

    def test_default_prefix(self, symbols: SymbolTable) -> None:
        """With defaults the plus sign goes first in the positive prefix."""
        result = resolve(AffixSpec(always_show_plus_sign=True), symbols)

        assert result.positive == ("<plus>", "")
        assert result.negative == ("<minus>", "")

    def test_offset_mirrored(self, root_symbols: SymbolTable) -> None:
        """Plus is inserted at the minus sign's offset in the negative prefix."""
        spec = AffixSpec(
            positive_prefix_pattern="¤ ",
            negative_prefix_pattern="¤ -",
            always_show_plus_sign=True,
        )

        assert resolve(spec, root_symbols).positive.prefix == "¤ +"

    def test_offset_clamped(self, root_symbols: SymbolTable) -> None:
        """An offset beyond the positive prefix appends at its end."""
        spec = AffixSpec(
            positive_prefix="$",
            negative_prefix_pattern="abc-",
            always_show_plus_sign=True,
        )

        assert resolve(spec, root_symbols).positive.prefix == "$+"

    def test_minus_in_suffix(self, root_symbols: SymbolTable) -> None:
        """Minus found only in the negative suffix puts plus in the positive suffix."""
        spec = AffixSpec(
            positive_suffix_pattern=" %",
            negative_suffix_pattern=" %-",
            always_show_plus_sign=True,
        )

        result = resolve(spec, root_symbols)

        assert result.negative == ("", " %-")
        assert result.positive == ("", " %+")

    def test_no_minus_anywhere(self, symbols: SymbolTable) -> None:
        """Without a minus sign in the negative pair, plus is prepended."""
        spec = AffixSpec(
            positive_prefix=" ",
            negative_prefix="(",
            negative_suffix=")",
            always_show_plus_sign=True,
        )

        assert resolve(spec, symbols).positive == ("<plus> ", "")

    def test_no_deduplication(self, root_symbols: SymbolTable) -> None:
        """An existing plus sign in the positive prefix is doubled."""
        spec = AffixSpec(positive_prefix_pattern="+", always_show_plus_sign=True)

        assert resolve(spec, root_symbols).positive.prefix == "++"

    def test_empty_minus_sign(self) -> None:
        """An empty minus sign text is never searched for."""
        table = SymbolTable(minus_sign="")
        spec = AffixSpec(negative_suffix="x", always_show_plus_sign=True)

        result = resolve(spec, table)

        assert result.negative == ("", "x")
        assert result.positive == ("+", "")

    def test_flag_off_leaves_positive(self, symbols: SymbolTable) -> None:
        """Without the flag the positive pair is untouched."""
        assert resolve(AffixSpec(), symbols).positive == ("", "")


# ============================================================================
# MODIFIERS AND APPLY
# ============================================================================


class TestApply:
    """apply() appends the modifier matching the sign of the value."""

    def test_positive_value(self, symbols: SymbolTable) -> None:
        """Positive numbers get the positive modifier."""
        holder = ModifierHolder()

        apply(123, holder, symbols, AffixSpec(always_show_plus_sign=True))

        assert len(holder) == 1
        assert holder.apply_all("123") == "<plus>123"

    def test_negative_zero(self, symbols: SymbolTable) -> None:
        """-0.0 selects the negative modifier."""
        holder: list[AffixModifier] = []

        apply(-0.0, holder, symbols, AffixSpec())

        assert holder[0].pair == ("<minus>", "")

    def test_decimal_negative_zero(self, root_symbols: SymbolTable) -> None:
        """Decimal('-0') selects the negative modifier."""
        holder = ModifierHolder()
        spec = AffixSpec(negative_prefix_pattern="(", negative_suffix_pattern=")")

        apply(Decimal("-0"), holder, root_symbols, spec)

        assert holder.apply_all("0") == "(0)"

    def test_failure_leaves_holder_unchanged(self, symbols: SymbolTable) -> None:
        """A pattern error propagates before anything is appended."""
        holder = ModifierHolder()

        with pytest.raises(PatternSyntaxError):
            apply(1, holder, symbols, AffixSpec(positive_suffix_pattern="'%"))

        assert len(holder) == 0

    def test_resolver_method(self, symbols: SymbolTable) -> None:
        """AffixResolver.apply() behaves like the module function."""
        resolver = AffixResolver()
        holder: list[AffixModifier] = []

        resolver.apply(-1, holder, symbols, AffixSpec())
        resolver.apply(1, holder, symbols, AffixSpec())

        assert [m.pair for m in holder] == [("<minus>", ""), ("", "")]


class TestGetModifier:
    """get_modifier() exposes the resolved pair as modifiers."""

    def test_modifier_matches_result(self, symbols: SymbolTable) -> None:
        """Modifier pairs equal the resolved AffixPairs."""
        spec = AffixSpec(positive_suffix_pattern="%", negative_suffix_pattern="%")

        result = resolve(spec, symbols)
        modifier = get_modifier(spec, symbols)

        assert modifier.positive.pair == result.positive
        assert modifier.negative.pair == result.negative
        assert modifier.negative.pair == AffixPair("<minus>", "<pct>")

    def test_uses_given_resolver(self, symbols: SymbolTable) -> None:
        """Module functions use the caller's resolver and its cache."""
        resolver = AffixResolver()
        spec = AffixSpec(negative_prefix_pattern="(")

        first = get_modifier(spec, symbols, resolver=resolver)
        second = get_modifier(spec, symbols, resolver=resolver)

        assert first is second
        assert resolver.parse_count == 1


# ============================================================================
# ERRORS
# ============================================================================


class TestResolveErrors:
    """Pattern errors propagate to the caller."""

    @pytest.mark.parametrize(
        "field_name",
        [
            "positive_prefix_pattern",
            "positive_suffix_pattern",
            "negative_prefix_pattern",
            "negative_suffix_pattern",
        ],
    )
    def test_unterminated_quote_in_any_slot(self, symbols: SymbolTable, field_name: str) -> None:
        """Every pattern slot reports an unterminated quote."""
        spec = AffixSpec(**{field_name: "ab'c"})

        with pytest.raises(PatternSyntaxError) as exc_info:
            resolve(spec, symbols)

        assert exc_info.value.pattern == "ab'c"
        assert exc_info.value.offset == 2
