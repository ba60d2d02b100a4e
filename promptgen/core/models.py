"""
Script data models - prompts and their responses.

These are the output of the tree builder and the only types the
navigator depends on. They are frozen Pydantic models so a parsed
script can be shared between navigators without copying, and dumped
to / validated from JSON.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class ScriptModel(BaseModel):
    """Base class for immutable script entities."""

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )


class Response(ScriptModel):
    """
    A selectable answer belonging to a prompt.

    Attributes:
        text: Player-facing text of the answer
        label: Label of the prompt to jump to, None to advance sequentially
    """
    text: str
    label: Optional[str] = None


class Prompt(ScriptModel):
    """
    A scene/question node.

    Attributes:
        text: Prompt text
        label: Optional jump target name ("" is a valid label)
        responses: Answers in document order
    """
    text: str
    label: Optional[str] = None
    responses: tuple[Response, ...] = ()

    @property
    def has_responses(self) -> bool:
        return len(self.responses) > 0
