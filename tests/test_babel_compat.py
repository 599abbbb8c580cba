"""Tests for babel_compat module - optional Babel dependency handling.

Tests the lazy import infrastructure, error handling, and availability checking
for the optional Babel dependency.
"""

from unittest.mock import patch

import pytest

from numaffix import SymbolTable
from numaffix.core.babel_compat import (
    BabelImportError,
    get_babel_numbers,
    get_locale_class,
    get_unknown_locale_error,
    is_babel_available,
    require_babel,
)

babel = pytest.importorskip("babel")


class TestBabelAvailability:
    """Test Babel availability checking."""

    def test_is_babel_available_in_test_environment(self) -> None:
        """Babel is installed through the test extra."""
        assert is_babel_available() is True

    def test_require_babel_does_not_raise_when_available(self) -> None:
        """require_babel is a no-op when Babel is installed."""
        require_babel("SymbolTable.from_locale")


class TestBabelImportError:
    """Test BabelImportError exception class."""

    def test_message_includes_feature_and_install_hint(self) -> None:
        """Error message names the feature and the extra to install."""
        error = BabelImportError("SymbolTable.from_locale")

        assert "SymbolTable.from_locale" in str(error)
        assert "pip install numaffix[babel]" in str(error)
        assert error.feature == "SymbolTable.from_locale"

    def test_is_import_error(self) -> None:
        """BabelImportError is a subclass of ImportError."""
        assert isinstance(BabelImportError("x"), ImportError)


class TestBabelMissing:
    """Behavior when Babel is reported as unavailable."""

    def test_require_babel_raises(self) -> None:
        """require_babel raises BabelImportError naming the feature."""
        with (
            patch("numaffix.core.babel_compat._check_babel_available", return_value=False),
            pytest.raises(BabelImportError, match="my_feature"),
        ):
            require_babel("my_feature")

    def test_from_locale_raises(self) -> None:
        """SymbolTable.from_locale needs Babel."""
        with (
            patch("numaffix.core.babel_compat._check_babel_available", return_value=False),
            pytest.raises(BabelImportError, match="SymbolTable.from_locale"),
        ):
            SymbolTable.from_locale("en_US")

    def test_direct_construction_needs_no_babel(self) -> None:
        """Building a SymbolTable by hand never touches Babel."""
        with patch("numaffix.core.babel_compat._check_babel_available", return_value=False):
            table = SymbolTable(minus_sign="−")

        assert table.minus_sign == "−"


class TestLazyAccessors:
    """Accessors return the real Babel objects."""

    def test_get_locale_class(self) -> None:
        """get_locale_class returns babel.Locale."""
        assert get_locale_class() is babel.Locale

    def test_get_unknown_locale_error(self) -> None:
        """get_unknown_locale_error returns babel.core.UnknownLocaleError."""
        assert get_unknown_locale_error() is babel.core.UnknownLocaleError

    def test_get_babel_numbers(self) -> None:
        """get_babel_numbers exposes the functions the symbol table uses."""
        numbers = get_babel_numbers()

        assert numbers.get_minus_sign_symbol("en_US") == "-"
        assert numbers.get_currency_symbol("USD", locale="en_US") == "$"
