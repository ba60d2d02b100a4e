"""
Error types for the script pipeline and the navigator.

Every stage raises its own subclass so callers can catch either the
coarse family (``ParseError``, ``NavigationError``) or one specific kind.

Hierarchy:
    PromptgenError
        ParseError
            LexError
                UnterminatedStringLiteral
                UnterminatedLabelLiteral
                InvalidLabelCharacter
            ChunkError
                InvalidSyntax
        ScriptFormatError
        NavigationError
            StartError
            NoMatchingLabel
            EndOfScript
"""

from __future__ import annotations

from typing import Optional


def line_and_column(source: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into a 1-based (line, column) pair."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


class PromptgenError(Exception):
    """Base class for every error raised by promptgen."""


class ParseError(PromptgenError):
    """
    Raised when a script cannot be turned into prompts.

    Attributes:
        offset: Character offset in the source where the problem was found
        line: 1-based line number (0 if the source was not known)
        column: 1-based column number (0 if the source was not known)
    """

    default_message = "invalid syntax"

    def __init__(
        self,
        message: Optional[str] = None,
        offset: int = 0,
        source: Optional[str] = None,
    ):
        self.message = message or self.default_message
        self.offset = offset
        self.line = 0
        self.column = 0
        if source is not None:
            self.locate(source)
        super().__init__(self.message)

    def locate(self, source: str) -> ParseError:
        """Fill in line/column from the source text."""
        self.line, self.column = line_and_column(source, self.offset)
        return self

    def __str__(self) -> str:
        if self.line:
            return f"{self.line}:{self.column}: {self.message}"
        return f"offset {self.offset}: {self.message}"


class LexError(ParseError):
    """Malformed low-level syntax found while scanning."""


class UnterminatedStringLiteral(LexError):
    default_message = "unterminated string literal"


class UnterminatedLabelLiteral(LexError):
    default_message = "unterminated label literal"


class InvalidLabelCharacter(LexError):
    default_message = "whitespace is not allowed inside a label"


class ChunkError(ParseError):
    """Token sequence does not match the marker/label/text grammar."""


class InvalidSyntax(ChunkError):
    pass


class ScriptFormatError(PromptgenError):
    """A script cannot be written to, or read from, a serialized form."""


class NavigationError(PromptgenError):
    """Base class for failures while walking a script."""


class StartError(NavigationError):
    """The script has no prompts to start from."""

    def __init__(self, message: str = "script contains no prompts"):
        super().__init__(message)


class NoMatchingLabel(NavigationError):
    """A response names a label that no prompt carries."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"no prompt is labeled {label!r}")


class EndOfScript(NavigationError):
    """A sequential advance ran past the last prompt."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"prompt {index} is the last prompt in the script")
