"""Affix pattern tokenizer and symbol substitution.

Implements the affix mini-language of UTS #35 section 3.2: quote-escaping
plus locale symbol placeholders. A pattern is scanned once, left to right,
with one character of lookahead.

Grammar:
    Default mode:
        ''      -> one literal quote
        '       -> enter quoted mode
        + - % ‰ -> plus, minus, percent, permille placeholder
        ¤...    -> currency placeholder (run length selects the display form)
        other   -> literal character
    Quoted mode:
        ''      -> one literal quote, stay quoted
        '       -> leave quoted mode
        other   -> literal character (no placeholder substitution)

End of input while quoted is the only error (PatternSyntaxError).

Every function here is pure. Results depend only on (pattern, symbols),
which makes substitute() safe to memoize.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from numaffix.constants import (
    CURRENCY_PLACEHOLDER,
    MINUS_SIGN_PLACEHOLDER,
    PERCENT_PLACEHOLDER,
    PERMILLE_PLACEHOLDER,
    PLACEHOLDER_CHARS,
    PLUS_SIGN_PLACEHOLDER,
    QUOTE,
)
from numaffix.diagnostics import ErrorTemplate, PatternSyntaxError
from numaffix.enums import CURRENCY_TOKEN_TYPES, AffixTokenType
from numaffix.pattern.cursor import Cursor
from numaffix.symbols import SymbolTable

__all__ = [
    "AffixToken",
    "contains_type",
    "escape",
    "has_currency_symbols",
    "substitute",
    "tokenize",
]

_SIGN_PLACEHOLDERS: dict[str, AffixTokenType] = {
    PLUS_SIGN_PLACEHOLDER: AffixTokenType.PLUS_SIGN,
    MINUS_SIGN_PLACEHOLDER: AffixTokenType.MINUS_SIGN,
    PERCENT_PLACEHOLDER: AffixTokenType.PERCENT,
    PERMILLE_PLACEHOLDER: AffixTokenType.PERMILLE,
}

# Run length of ¤ -> display form. Longer runs fall back to the symbol.
_CURRENCY_BY_RUN: dict[int, AffixTokenType] = {
    1: AffixTokenType.CURRENCY_SYMBOL,
    2: AffixTokenType.CURRENCY_CODE,
    3: AffixTokenType.CURRENCY_NAME,
}


@dataclass(frozen=True, slots=True)
class AffixToken:
    """One lexical unit of an affix pattern.

    Attributes:
        type: Token kind
        text: Unescaped text for LITERAL tokens, raw source for placeholders
        offset: Character offset of the token's first source character
    """

    type: AffixTokenType
    text: str
    offset: int


def tokenize(pattern: str) -> Iterator[AffixToken]:
    """Lazily split an affix pattern into literal and placeholder tokens.

    Consecutive literal characters (quoted or not) are merged into a single
    LITERAL token.

    Raises:
        PatternSyntaxError: When the scan reaches the end of the pattern
            inside a quoted section

    Example:
        >>> [(t.type.value, t.text) for t in tokenize("'#'¤¤ -")]
        [('literal', '#'), ('currency_code', '¤¤'), ('literal', ' '), ('minus_sign', '-')]
    """
    cursor = Cursor(pattern, 0)
    literal: list[str] = []
    literal_start = 0

    while not cursor.is_eof:
        char = cursor.current

        if char == QUOTE:
            if not literal:
                literal_start = cursor.pos
            if cursor.peek(1) == QUOTE:
                literal.append(QUOTE)
                cursor = cursor.advance(2)
                continue
            cursor = _scan_quoted(cursor, literal)
            continue

        token_type = _SIGN_PLACEHOLDERS.get(char)
        if token_type is not None or char == CURRENCY_PLACEHOLDER:
            if literal:
                yield AffixToken(AffixTokenType.LITERAL, "".join(literal), literal_start)
                literal.clear()
            start = cursor.pos
            if token_type is None:
                cursor = cursor.skip_run(CURRENCY_PLACEHOLDER)
                token_type = _CURRENCY_BY_RUN.get(
                    cursor.pos - start, AffixTokenType.CURRENCY_SYMBOL
                )
            else:
                cursor = cursor.advance()
            yield AffixToken(token_type, pattern[start : cursor.pos], start)
            continue

        if not literal:
            literal_start = cursor.pos
        literal.append(char)
        cursor = cursor.advance()

    if literal:
        yield AffixToken(AffixTokenType.LITERAL, "".join(literal), literal_start)


def _scan_quoted(cursor: Cursor, literal: list[str]) -> Cursor:
    """Consume a quoted section starting at its opening quote.

    Appends the section's text to literal and returns the cursor positioned
    after the closing quote.
    """
    opening = cursor.pos
    cursor = cursor.advance()
    while not cursor.is_eof:
        char = cursor.current
        if char == QUOTE:
            if cursor.peek(1) == QUOTE:
                literal.append(QUOTE)
                cursor = cursor.advance(2)
                continue
            return cursor.advance()
        literal.append(char)
        cursor = cursor.advance()

    diagnostic = ErrorTemplate.unterminated_quote(cursor.source, opening)
    raise PatternSyntaxError(diagnostic, pattern=cursor.source, offset=opening)


def substitute(pattern: str, symbols: SymbolTable) -> str:
    """Expand an affix pattern into literal text using locale symbols.

    Args:
        pattern: Affix pattern (e.g., "-", "'%'", "¤ ")
        symbols: Texts for the placeholder characters

    Returns:
        Literal affix text with no remaining pattern syntax

    Raises:
        PatternSyntaxError: If a quoted section is never closed

    Examples:
        >>> substitute("%", SymbolTable(percent_sign="٪"))
        '٪'
        >>> substitute("'%'", SymbolTable(percent_sign="٪"))
        '%'
        >>> substitute("''", SymbolTable())
        "'"
    """
    parts: list[str] = []
    for token in tokenize(pattern):
        if token.type is AffixTokenType.LITERAL:
            parts.append(token.text)
        else:
            parts.append(symbols.text_for(token.type))
    return "".join(parts)


def escape(text: str) -> str:
    """Quote literal text so that substitute() reproduces it unchanged.

    Placeholder characters are wrapped in quotes (adjacent ones share a
    quoted section) and quote characters are doubled.

    Examples:
        >>> escape("50%")
        "50'%'"
        >>> escape("it's")
        "it''s"
        >>> substitute(escape("+-%"), SymbolTable(minus_sign="\\u2212"))
        '+-%'
    """
    out: list[str] = []
    in_quote = False
    for char in text:
        if char == QUOTE:
            out.append(QUOTE * 2)
        elif char in PLACEHOLDER_CHARS:
            if not in_quote:
                out.append(QUOTE)
                in_quote = True
            out.append(char)
        else:
            if in_quote:
                out.append(QUOTE)
                in_quote = False
            out.append(char)
    if in_quote:
        out.append(QUOTE)
    return "".join(out)


def contains_type(pattern: str, token_type: AffixTokenType) -> bool:
    """Check whether a pattern contains a token of the given type.

    Scanning stops at the first match, so an unterminated quote after the
    match is not reported.

    Example:
        >>> contains_type("#'-'", AffixTokenType.MINUS_SIGN)
        False
    """
    return any(token.type is token_type for token in tokenize(pattern))


def has_currency_symbols(pattern: str) -> bool:
    """Check whether a pattern contains any currency placeholder."""
    return any(token.type in CURRENCY_TOKEN_TYPES for token in tokenize(pattern))
