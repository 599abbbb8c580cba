"""Affix declaration snapshot.

AffixSpec is an immutable capture of the eight affix fields and the
plus-sign flag a number formatter is configured with. Mutable property
sources (builders, settings objects) are snapshotted with
AffixSpec.from_properties() before resolution, so results computed from a
snapshot never change when the source is edited afterwards.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Protocol

from numaffix.enums import AffixSlot

__all__ = ["AffixProperties", "AffixSpec"]

_STRING_FIELDS: tuple[str, ...] = (
    "positive_prefix",
    "positive_suffix",
    "negative_prefix",
    "negative_suffix",
    "positive_prefix_pattern",
    "positive_suffix_pattern",
    "negative_prefix_pattern",
    "negative_suffix_pattern",
)


class AffixProperties(Protocol):
    """Read-only view of a property source declaring affixes.

    Literal fields are used verbatim; pattern fields go through symbol
    substitution. None means unset. Values may be any object whose str()
    is the affix text (e.g., a StringIO-backed builder exposing __str__).
    """

    @property
    def positive_prefix(self) -> object | None: ...  # noqa: D102

    @property
    def positive_suffix(self) -> object | None: ...  # noqa: D102

    @property
    def negative_prefix(self) -> object | None: ...  # noqa: D102

    @property
    def negative_suffix(self) -> object | None: ...  # noqa: D102

    @property
    def positive_prefix_pattern(self) -> object | None: ...  # noqa: D102

    @property
    def positive_suffix_pattern(self) -> object | None: ...  # noqa: D102

    @property
    def negative_prefix_pattern(self) -> object | None: ...  # noqa: D102

    @property
    def negative_suffix_pattern(self) -> object | None: ...  # noqa: D102

    @property
    def always_show_plus_sign(self) -> bool: ...  # noqa: D102


@dataclass(frozen=True, slots=True)
class AffixSpec:
    """Immutable snapshot of affix declarations.

    If both a literal field and its pattern field are set, the literal
    wins and the pattern is never parsed.

    Attributes:
        positive_prefix: Literal prefix for positive numbers
        positive_suffix: Literal suffix for positive numbers
        negative_prefix: Literal prefix for negative numbers
        negative_suffix: Literal suffix for negative numbers
        positive_prefix_pattern: Pattern prefix for positive numbers
        positive_suffix_pattern: Pattern suffix for positive numbers
        negative_prefix_pattern: Pattern prefix for negative numbers
        negative_suffix_pattern: Pattern suffix for negative numbers
        always_show_plus_sign: Mirror the minus sign with a plus sign on
            positive numbers. Use this instead of a plus sign in the positive
            affixes; no de-duplication is attempted if both are present.

    Example:
        >>> spec = AffixSpec(negative_prefix_pattern="(", negative_suffix_pattern=")")
        >>> spec.pattern_for(AffixSlot.NEGATIVE_SUFFIX)
        ')'
        >>> spec.literal_for(AffixSlot.NEGATIVE_SUFFIX) is None
        True
    """

    positive_prefix: str | None = None
    positive_suffix: str | None = None
    negative_prefix: str | None = None
    negative_suffix: str | None = None
    positive_prefix_pattern: str | None = None
    positive_suffix_pattern: str | None = None
    negative_prefix_pattern: str | None = None
    negative_suffix_pattern: str | None = None
    always_show_plus_sign: bool = False

    def __post_init__(self) -> None:
        """Reject non-string affix values.

        Raises:
            TypeError: If an affix field is neither str nor None
        """
        for name in _STRING_FIELDS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                msg = f"{name} must be str or None, got {type(value).__name__}"
                raise TypeError(msg)

    @classmethod
    def from_properties(cls, source: AffixProperties | Any) -> AffixSpec:
        """Snapshot a property source.

        Missing attributes count as unset. Set values are converted with
        str() now, so later changes to the source are not observed.

        Example:
            >>> class Props:
            ...     negative_suffix_pattern = "-"
            >>> AffixSpec.from_properties(Props()).negative_suffix_pattern
            '-'
        """
        values: dict[str, Any] = {}
        for name in _STRING_FIELDS:
            value = getattr(source, name, None)
            values[name] = None if value is None else str(value)
        values["always_show_plus_sign"] = bool(getattr(source, "always_show_plus_sign", False))
        return cls(**values)

    def replace(self, **changes: Any) -> AffixSpec:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def literal_for(self, slot: AffixSlot) -> str | None:
        """Literal value declared for a slot, or None."""
        value: str | None = getattr(self, slot.value)
        return value

    def pattern_for(self, slot: AffixSlot) -> str | None:
        """Pattern value declared for a slot, or None."""
        value: str | None = getattr(self, f"{slot.value}_pattern")
        return value
