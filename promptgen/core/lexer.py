"""
Lexer - turns script text into a flat token sequence.

Recognized constructs:

```
>            prompt marker
<            response marker
"text"       string literal, may contain newlines
(LABEL)      label literal, no whitespace inside
```

Anything else between constructs is skipped. Tokens do not copy text:
literals carry a ``Span`` into the source, resolved on demand.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from promptgen.core.errors import (
    InvalidLabelCharacter,
    UnterminatedLabelLiteral,
    UnterminatedStringLiteral,
)


PROMPT_MARKER = ">"
RESPONSE_MARKER = "<"
QUOTE = '"'
LABEL_OPEN = "("
LABEL_CLOSE = ")"

# Characters that may not appear between the label parentheses
LABEL_WHITESPACE = frozenset(" \t\n\r\f\v")


class TokenKind(Enum):
    """Kinds of token produced by the lexer."""
    PROMPT_MARKER = auto()
    RESPONSE_MARKER = auto()
    STRING_LITERAL = auto()
    LABEL_LITERAL = auto()


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` character range into the source text."""
    start: int
    end: int

    def resolve(self, source: str) -> str:
        return source[self.start:self.end]

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Token:
    """
    A single lexical token.

    Attributes:
        kind: What the token is
        offset: Source offset of the first character of the construct
        span: Contents of a literal (between the delimiters), None for markers
    """
    kind: TokenKind
    offset: int
    span: Optional[Span] = None

    @property
    def is_marker(self) -> bool:
        return self.kind in (TokenKind.PROMPT_MARKER, TokenKind.RESPONSE_MARKER)

    def text(self, source: str) -> Optional[str]:
        """Resolve the literal text against the source."""
        if self.span is None:
            return None
        return self.span.resolve(source)


def _scan_string(source: str, start: int) -> Span:
    """Scan a string literal whose opening quote is at ``start``."""
    end = source.find(QUOTE, start + 1)
    if end == -1:
        raise UnterminatedStringLiteral(offset=start, source=source)
    return Span(start + 1, end)


def _scan_label(source: str, start: int) -> Span:
    """Scan a label literal whose opening parenthesis is at ``start``."""
    position = start + 1
    while position < len(source):
        char = source[position]
        if char == LABEL_CLOSE:
            return Span(start + 1, position)
        if char in LABEL_WHITESPACE:
            raise InvalidLabelCharacter(offset=position, source=source)
        position += 1
    raise UnterminatedLabelLiteral(offset=start, source=source)


def scan(source: str) -> list[Token]:
    """
    Scan the whole source into tokens.

    Args:
        source: Script text

    Returns:
        Tokens in source order

    Raises:
        LexError: On the first malformed string or label literal
    """
    tokens: list[Token] = []
    position = 0

    while position < len(source):
        char = source[position]

        if char == PROMPT_MARKER:
            tokens.append(Token(TokenKind.PROMPT_MARKER, position))
        elif char == RESPONSE_MARKER:
            tokens.append(Token(TokenKind.RESPONSE_MARKER, position))
        elif char == QUOTE:
            span = _scan_string(source, position)
            tokens.append(Token(TokenKind.STRING_LITERAL, position, span))
            position = span.end
        elif char == LABEL_OPEN:
            span = _scan_label(source, position)
            tokens.append(Token(TokenKind.LABEL_LITERAL, position, span))
            position = span.end

        # The closing delimiter of a literal is skipped here as well
        position += 1

    return tokens
