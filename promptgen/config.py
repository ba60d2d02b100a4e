"""
Runtime configuration.
"""

from __future__ import annotations

from typing import Iterable

# Label of the prompt a navigation session starts on
START_LABEL = "START"


class PromptgenConfig:
    """Configuration shared by the navigator, session, library and CLI."""

    def __init__(
        self,
        start_label: str = START_LABEL,
        encoding: str = "utf-8",
        script_suffixes: Iterable[str] = (".txt", ".prompts"),
        compiled_suffix: str = ".json",
    ):
        self.start_label = start_label
        self.encoding = encoding
        self.script_suffixes = tuple(script_suffixes)
        self.compiled_suffix = compiled_suffix
