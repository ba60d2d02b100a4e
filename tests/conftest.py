import os
import sys

import pytest

# Ensure promptgen can be imported without installing
sys.path.append(os.getcwd())

SAMPLE_SCRIPT = '''> (START) "Are you a human?"
< "Yes, I am"
< (ANS_NO) "No"
> (ANS_NO) "That's very weird! Care to try again?"
< (START) "Please!"
'''

# Three prompts; answering "Yes, I am" reaches the last one
FINISHING_SCRIPT = '''> (NO) "Are you a human?"
< (YES) "Yes, I am"
< (ANS_NO) "No"
> (ANS_NO) "That's very weird! Care to try again?"
< (NO) "Please!"
> (YES) "Nice! Glad to meet you human!"
'''

LABELLESS_SCRIPT = '''> "Are you a human?"
< "Yes, I am"
> "Nice! Glad to meet you human!"
'''


@pytest.fixture
def sample_source():
    return SAMPLE_SCRIPT


@pytest.fixture
def sample_prompts():
    from promptgen.core.parser import parse
    return parse(SAMPLE_SCRIPT)


@pytest.fixture
def finishing_prompts():
    from promptgen.core.parser import parse
    return parse(FINISHING_SCRIPT)


@pytest.fixture
def labelless_prompts():
    from promptgen.core.parser import parse
    return parse(LABELLESS_SCRIPT)


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from promptgen.runtime.events import EventBus
    return EventBus()


@pytest.fixture
def script_file(tmp_path):
    """The sample script written to disk."""
    path = tmp_path / "intro.txt"
    path.write_text(SAMPLE_SCRIPT, encoding="utf-8")
    return path
