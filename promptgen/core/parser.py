"""
Tree builder - turns chunks into prompts, and the full parse pipeline.

```
> (START) "Are you a human?"
< "Yes, I am"
< (ANS_NO) "No"
> (ANS_NO) "That's very weird! Care to try again?"
< (START) "Please!"
```

parses to two prompts; the first owns two responses, the second one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from promptgen.core.chunker import Chunk, group
from promptgen.core.errors import ParseError
from promptgen.core.lexer import scan
from promptgen.core.models import Prompt, Response

logger = logging.getLogger(__name__)


def _collect_responses(chunks: Sequence[Chunk], start: int, source: str) -> tuple[int, list[Response]]:
    """Take the run of response chunks beginning at ``start``."""
    responses = []
    position = start
    while position < len(chunks) and chunks[position].is_response:
        chunk = chunks[position]
        responses.append(Response(
            text=chunk.text.resolve(source),
            label=chunk.label.resolve(source) if chunk.label is not None else None,
        ))
        position += 1
    return position, responses


def build(chunks: Sequence[Chunk], source: str) -> list[Prompt]:
    """
    Group chunks into prompts. Never fails.

    Response chunks with no preceding prompt are dropped.

    Args:
        chunks: Chunker output
        source: The text the chunk spans point into
    """
    prompts: list[Prompt] = []
    position = 0

    while position < len(chunks):
        chunk = chunks[position]
        if not chunk.is_prompt:
            logger.debug(f"Dropping response at offset {chunk.offset} with no prompt before it")
            position += 1
            continue

        position, responses = _collect_responses(chunks, position + 1, source)
        prompts.append(Prompt(
            text=chunk.text.resolve(source),
            label=chunk.label.resolve(source) if chunk.label is not None else None,
            responses=tuple(responses),
        ))

    return prompts


def parse(source: str) -> list[Prompt]:
    """
    Parse script text into prompts.

    Raises:
        ParseError: A LexError or ChunkError subclass, with line/column set
    """
    try:
        chunks = group(scan(source))
    except ParseError as e:
        if not e.line:
            e.locate(source)
        raise

    return build(chunks, source)


def parse_file(path: str | Path, encoding: str = "utf-8") -> list[Prompt]:
    """Parse a script file."""
    path = Path(path)
    with open(path, 'r', encoding=encoding) as f:
        content = f.read()
    return parse(content)
