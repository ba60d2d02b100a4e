"""
Navigator - walks a parsed script one answer at a time.

A navigator is an immutable value: ``answer`` returns a new navigator
and leaves the old one (and the script) untouched, so any number of
navigators can share one script.

Usage:
    navigator = Navigator.start(parse(text))
    print(navigator.current.text)
    navigator = navigator.answer(navigator.current.responses[0])
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from promptgen.config import START_LABEL
from promptgen.core.errors import EndOfScript, NoMatchingLabel, StartError
from promptgen.core.models import Prompt, Response

logger = logging.getLogger(__name__)


def index_labels(script: Sequence[Prompt]) -> dict[str, int]:
    """Map each label to the index of the first prompt carrying it."""
    labels: dict[str, int] = {}
    for index, prompt in enumerate(script):
        if prompt.label is not None and prompt.label not in labels:
            labels[prompt.label] = index
    return labels


@dataclass(frozen=True)
class Navigator:
    """
    Position in a script.

    Attributes:
        script: The prompts, in document order
        index: Index of the current prompt
    """
    script: tuple[Prompt, ...]
    index: int
    labels: Optional[Mapping[str, int]] = field(default=None, repr=False, compare=False, hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'script', tuple(self.script))
        if not 0 <= self.index < len(self.script):
            raise IndexError(f"prompt index {self.index} out of range for {len(self.script)} prompts")

        # Built once per lineage; derived navigators receive it from answer()
        if self.labels is None:
            object.__setattr__(self, 'labels', index_labels(self.script))

    @classmethod
    def start(cls, script: Sequence[Prompt], start_label: str = START_LABEL) -> Navigator:
        """
        Begin at the prompt labeled ``start_label``, or the first prompt.

        Raises:
            StartError: If the script is empty
        """
        script = tuple(script)
        if not script:
            raise StartError()

        labels = index_labels(script)
        index = labels.get(start_label, 0)
        logger.debug(f"Starting at prompt {index} of {len(script)}")
        return cls(script=script, index=index, labels=labels)

    @property
    def current(self) -> Prompt:
        """The prompt at the cursor."""
        return self.script[self.index]

    @property
    def is_last(self) -> bool:
        """True if a sequential advance would run past the end."""
        return self.index + 1 >= len(self.script)

    def answer(self, response: Response) -> Navigator:
        """
        Move according to a response.

        A labeled response jumps to the first prompt with that label;
        an unlabeled one advances to the next prompt.

        Raises:
            NoMatchingLabel: If no prompt carries the response label
            EndOfScript: If an unlabeled response is given on the last prompt
        """
        if response.label is not None:
            index = self.labels.get(response.label)
            if index is None:
                raise NoMatchingLabel(response.label)
        else:
            if self.is_last:
                raise EndOfScript(self.index)
            index = self.index + 1

        logger.debug(f"Moving from prompt {self.index} to {index}")
        return Navigator(script=self.script, index=index, labels=self.labels)

    def choose(self, position: int) -> Navigator:
        """
        Answer with the current prompt's response at ``position``.

        Raises:
            IndexError: If the current prompt has no such response
        """
        responses = self.current.responses
        if not 0 <= position < len(responses):
            raise IndexError(f"prompt {self.index} has {len(responses)} responses, no {position}")
        return self.answer(responses[position])
