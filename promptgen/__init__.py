"""
promptgen

A small markup for branching dialogue scripts and a runtime that walks them.

Quick Start:
    from promptgen import parse, Navigator

    prompts = parse('''
    > (START) "Are you a human?"
    < "Yes, I am"
    < (ANS_NO) "No"
    > (ANS_NO) "That's very weird! Care to try again?"
    < (START) "Please!"
    ''')

    navigator = Navigator.start(prompts)
    navigator = navigator.answer(navigator.current.responses[1])
    assert navigator.current.label == "ANS_NO"
"""

__version__ = "0.1.0"

from promptgen.config import PromptgenConfig, START_LABEL

from promptgen.core import (
    # Errors
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
    # Pipeline
    parse,
    parse_file,
    # Models
    Prompt,
    Response,
    # Writer
    dump_script,
    script_to_json,
    script_from_json,
    compile_script_file,
)

from promptgen.runtime import (
    Navigator,
    DialogueEvent,
    Event,
    EventBus,
    DialogueSession,
)

from promptgen.resources import ScriptLibrary

__all__ = [
    # Config
    "PromptgenConfig",
    "START_LABEL",
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
    "parse",
    "parse_file",
    "Prompt",
    "Response",
    "dump_script",
    "script_to_json",
    "script_from_json",
    "compile_script_file",
    # Runtime
    "Navigator",
    "DialogueEvent",
    "Event",
    "EventBus",
    "DialogueSession",
    # Resources
    "ScriptLibrary",
]
