"""Resolved affix values handed to the formatting pipeline.

Defines:
    - AffixPair: Immutable (prefix, suffix) for one sign
    - AffixModifier: Decorator wrapping formatted digits in one AffixPair
    - PositiveNegativeAffixModifier: Sign dispatch between two modifiers
    - ModifierHolder: Ordered collection the pipeline applies to digits
    - is_negative: Sign test where negative zero counts as negative

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal
from numbers import Real
from typing import NamedTuple, Protocol

__all__ = [
    "AffixModifier",
    "AffixPair",
    "ModifierHolder",
    "ModifierSink",
    "PositiveNegativeAffixModifier",
    "is_negative",
]


class AffixPair(NamedTuple):
    """Resolved prefix and suffix for one sign.

    Compares equal to a plain tuple:
        >>> AffixPair("", "") == ("", "")
        True
    """

    prefix: str
    suffix: str


class ModifierSink(Protocol):
    """Anything modifiers can be appended to (a list works)."""

    def append(self, modifier: AffixModifier, /) -> None: ...  # noqa: D102


@dataclass(frozen=True, slots=True)
class AffixModifier:
    """Immutable decorator adding a prefix and suffix around digits.

    Example:
        >>> AffixModifier("(", ")").apply("1,234")
        '(1,234)'
    """

    prefix: str
    suffix: str

    @classmethod
    def from_pair(cls, pair: AffixPair) -> AffixModifier:
        """Wrap a resolved AffixPair."""
        return cls(pair.prefix, pair.suffix)

    @property
    def pair(self) -> AffixPair:
        """The wrapped (prefix, suffix) pair."""
        return AffixPair(self.prefix, self.suffix)

    def apply(self, digits: str) -> str:
        """Return prefix + digits + suffix."""
        return f"{self.prefix}{digits}{self.suffix}"


def is_negative(value: int | float | Decimal | Real) -> bool:
    """Check the sign of a numeric value.

    Negative zero is negative for float and Decimal; a float NaN follows
    its sign bit.

    Examples:
        >>> is_negative(-0.0)
        True
        >>> is_negative(Decimal("-0"))
        True
        >>> is_negative(0)
        False
    """
    if isinstance(value, Decimal):
        return value.is_signed()
    if isinstance(value, float):
        return math.copysign(1.0, value) < 0
    return value < 0


@dataclass(frozen=True, slots=True)
class PositiveNegativeAffixModifier:
    """Positive and negative modifiers resolved from one configuration."""

    positive: AffixModifier
    negative: AffixModifier

    def select(self, value: int | float | Decimal | Real) -> AffixModifier:
        """Return the modifier matching the sign of value."""
        return self.negative if is_negative(value) else self.positive

    def apply(self, value: int | float | Decimal | Real, holder: ModifierSink) -> None:
        """Append the modifier matching the sign of value to holder."""
        holder.append(self.select(value))


@dataclass(slots=True)
class ModifierHolder:
    """Ordered modifiers collected for one formatting call.

    Modifiers are applied in insertion order, each wrapping the output of
    the previous one, so the first modifier added sits closest to the
    digits.

    Example:
        >>> holder = ModifierHolder()
        >>> holder.append(AffixModifier("", "%"))
        >>> holder.append(AffixModifier("-", ""))
        >>> holder.apply_all("12")
        '-12%'
    """

    _modifiers: list[AffixModifier] = field(default_factory=list)

    def append(self, modifier: AffixModifier) -> None:
        """Add a modifier after all current ones."""
        self._modifiers.append(modifier)

    def clear(self) -> None:
        """Remove all modifiers (reuse the holder for the next value)."""
        self._modifiers.clear()

    def apply_all(self, digits: str) -> str:
        """Wrap digits with every modifier in insertion order."""
        result = digits
        for modifier in self._modifiers:
            result = modifier.apply(result)
        return result

    def __iter__(self) -> Iterator[AffixModifier]:
        return iter(self._modifiers)

    def __len__(self) -> int:
        return len(self._modifiers)

    def __getitem__(self, index: int) -> AffixModifier:
        return self._modifiers[index]
