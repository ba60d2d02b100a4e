"""
Dialogue session - owns a navigator for one conversation.

Handles:
- Starting on the START prompt
- Applying chosen responses
- Publishing progress on an EventBus
- Ending the conversation when the script runs out
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from promptgen.config import PromptgenConfig
from promptgen.core.errors import EndOfScript, NoMatchingLabel, StartError
from promptgen.core.models import Prompt, Response
from promptgen.runtime.events import DialogueEvent, EventBus
from promptgen.runtime.navigator import Navigator

logger = logging.getLogger(__name__)

# End reasons reported with DialogueEvent.ENDED
END_OF_SCRIPT = "end_of_script"
NO_MATCHING_LABEL = "no_matching_label"
STOPPED = "stopped"


class DialogueSession:
    """
    Runs one dialogue at a time over a parsed script.

    Usage:
        session = DialogueSession()
        session.events.subscribe(DialogueEvent.PROMPT_ENTERED, show_prompt)
        session.begin(prompts)
        session.choose(0)
    """

    def __init__(
        self,
        events: Optional[EventBus] = None,
        config: Optional[PromptgenConfig] = None,
    ):
        self.events = events or EventBus()
        self.config = config or PromptgenConfig()

        self._navigator: Optional[Navigator] = None
        self.history: list[tuple[Prompt, Response]] = []
        self.end_reason: Optional[str] = None

        self._on_end: Optional[Callable[[str], None]] = None

    @property
    def is_active(self) -> bool:
        return self._navigator is not None

    @property
    def current(self) -> Optional[Prompt]:
        """The prompt being shown, or None when no dialogue is running."""
        if self._navigator is None:
            return None
        return self._navigator.current

    @property
    def navigator(self) -> Optional[Navigator]:
        return self._navigator

    def begin(self, script: Sequence[Prompt]) -> bool:
        """Start a dialogue. Returns False if the script has no prompts."""
        try:
            navigator = Navigator.start(script, start_label=self.config.start_label)
        except StartError as e:
            logger.warning(f"Cannot start dialogue: {e}")
            return False

        self._navigator = navigator
        self.history = []
        self.end_reason = None

        logger.info(f"Dialogue started at prompt {navigator.index} of {len(navigator.script)}")
        self.events.publish(DialogueEvent.STARTED, prompt_count=len(navigator.script))
        self._enter()
        return True

    def choose(self, position: int) -> Optional[Prompt]:
        """
        Answer with the current prompt's response at ``position``.

        Raises:
            IndexError: If the current prompt has no such response
        """
        prompt = self._require_active()
        if not 0 <= position < len(prompt.responses):
            raise IndexError(f"no response {position}; prompt has {len(prompt.responses)}")
        return self.answer(prompt.responses[position])

    def answer(self, response: Response) -> Optional[Prompt]:
        """
        Apply a response.

        Returns:
            The new current prompt, or None if the dialogue ended
        """
        prompt = self._require_active()
        self.history.append((prompt, response))
        self.events.publish(DialogueEvent.RESPONSE_CHOSEN, prompt=prompt, response=response)

        # A handler may have ended the dialogue
        if self._navigator is None:
            return None

        try:
            self._navigator = self._navigator.answer(response)
        except NoMatchingLabel as e:
            logger.info(f"Dialogue ended: {e}")
            self.end(NO_MATCHING_LABEL)
            return None
        except EndOfScript as e:
            logger.info(f"Dialogue ended: {e}")
            self.end(END_OF_SCRIPT)
            return None

        self._enter()
        return self._navigator.current

    def end(self, reason: str = STOPPED) -> None:
        """End the current dialogue."""
        if self._navigator is None:
            return

        self._navigator = None
        self.end_reason = reason
        self.events.publish(DialogueEvent.ENDED, reason=reason, steps=len(self.history))

        if self._on_end:
            self._on_end(reason)

    def on_end(self, callback: Callable[[str], None]) -> None:
        """Set callback for when the dialogue ends."""
        self._on_end = callback

    def _enter(self) -> None:
        self.events.publish(
            DialogueEvent.PROMPT_ENTERED,
            prompt=self._navigator.current,
            index=self._navigator.index,
        )

    def _require_active(self) -> Prompt:
        if self._navigator is None:
            raise RuntimeError("no dialogue is running")
        return self._navigator.current
