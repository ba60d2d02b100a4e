"""
Core script pipeline: lexer -> chunker -> tree builder.
"""

from promptgen.core.errors import (
    PromptgenError,
    ParseError,
    LexError,
    UnterminatedStringLiteral,
    UnterminatedLabelLiteral,
    InvalidLabelCharacter,
    ChunkError,
    InvalidSyntax,
    ScriptFormatError,
    NavigationError,
    StartError,
    NoMatchingLabel,
    EndOfScript,
)
from promptgen.core.lexer import Span, Token, TokenKind, scan
from promptgen.core.chunker import Chunk, Direction, group
from promptgen.core.models import Prompt, Response
from promptgen.core.parser import build, parse, parse_file
from promptgen.core.writer import (
    dump_script,
    script_to_json,
    script_from_json,
    save_json,
    load_json,
    compile_script_file,
)

__all__ = [
    # Errors
    "PromptgenError",
    "ParseError",
    "LexError",
    "UnterminatedStringLiteral",
    "UnterminatedLabelLiteral",
    "InvalidLabelCharacter",
    "ChunkError",
    "InvalidSyntax",
    "ScriptFormatError",
    "NavigationError",
    "StartError",
    "NoMatchingLabel",
    "EndOfScript",
    # Pipeline
    "Span",
    "Token",
    "TokenKind",
    "scan",
    "Chunk",
    "Direction",
    "group",
    "build",
    "parse",
    "parse_file",
    # Models
    "Prompt",
    "Response",
    # Writer
    "dump_script",
    "script_to_json",
    "script_from_json",
    "save_json",
    "load_json",
    "compile_script_file",
]
