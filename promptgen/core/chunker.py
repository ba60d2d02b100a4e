"""
Chunker - groups tokens into marker/label/text chunks.

Grammar, repeated until the tokens run out:

    chunk := marker [LABEL_LITERAL] STRING_LITERAL
    marker := PROMPT_MARKER | RESPONSE_MARKER
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence

from promptgen.core.errors import InvalidSyntax
from promptgen.core.lexer import Span, Token, TokenKind


class Direction(Enum):
    """Which side of the conversation a chunk belongs to."""
    PROMPT = auto()
    RESPONSE = auto()


_MARKER_DIRECTIONS = {
    TokenKind.PROMPT_MARKER: Direction.PROMPT,
    TokenKind.RESPONSE_MARKER: Direction.RESPONSE,
}


@dataclass(frozen=True)
class Chunk:
    """One line of dialogue: direction, optional jump label and text."""
    direction: Direction
    text: Span
    label: Optional[Span] = None
    offset: int = 0

    @property
    def is_prompt(self) -> bool:
        return self.direction == Direction.PROMPT

    @property
    def is_response(self) -> bool:
        return self.direction == Direction.RESPONSE


def _label_and_text(tokens: Sequence[Token], position: int, marker: Token) -> tuple[int, Optional[Span], Span]:
    """
    Parse ``LABEL STRING`` or ``STRING`` starting at ``position``.

    Returns:
        (number of tokens consumed, label span or None, text span)
    """
    first = tokens[position] if position < len(tokens) else None
    second = tokens[position + 1] if position + 1 < len(tokens) else None

    if first is None:
        raise InvalidSyntax("expected a label or text after the marker", offset=marker.offset)

    if first.kind == TokenKind.LABEL_LITERAL:
        if second is not None and second.kind == TokenKind.STRING_LITERAL:
            return 2, first.span, second.span
        where = second.offset if second is not None else first.offset
        raise InvalidSyntax("expected text after the label", offset=where)

    if first.kind == TokenKind.STRING_LITERAL:
        return 1, None, first.span

    raise InvalidSyntax("expected a label or text after the marker", offset=first.offset)


def group(tokens: Sequence[Token]) -> list[Chunk]:
    """
    Group a token sequence into chunks.

    Raises:
        InvalidSyntax: If the tokens do not follow the chunk grammar
    """
    chunks: list[Chunk] = []
    position = 0

    while position < len(tokens):
        marker = tokens[position]
        direction = _MARKER_DIRECTIONS.get(marker.kind)
        if direction is None:
            raise InvalidSyntax("expected '>' or '<'", offset=marker.offset)

        consumed, label, text = _label_and_text(tokens, position + 1, marker)
        chunks.append(Chunk(direction=direction, text=text, label=label, offset=marker.offset))
        position += consumed + 1

    return chunks
