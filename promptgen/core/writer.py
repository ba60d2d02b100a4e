"""
Script writer - converts parsed prompts back to text and to JSON.

The text form is canonical: one construct per line, a blank line
between prompts. The JSON form is what ``compile_script_file`` writes:

```
{
  "id": "intro",
  "prompts": [
    {"text": "...", "label": "START", "responses": [{"text": "...", "label": null}]}
  ]
}
```
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Sequence

import jsonschema
from pydantic import ValidationError

from promptgen.core.errors import ScriptFormatError
from promptgen.core.lexer import LABEL_CLOSE, LABEL_WHITESPACE, PROMPT_MARKER, QUOTE, RESPONSE_MARKER
from promptgen.core.models import Prompt
from promptgen.core.parser import parse_file

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "script.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Load the JSON schema for compiled scripts."""
    with open(SCHEMA_PATH, 'r', encoding='utf-8') as f:
        return json.load(f)


def _format_line(marker: str, text: str, label: Optional[str]) -> str:
    if QUOTE in text:
        raise ScriptFormatError(f"text cannot contain a double quote: {text!r}")

    if label is None:
        return f'{marker} "{text}"'

    if LABEL_CLOSE in label or any(c in LABEL_WHITESPACE for c in label):
        raise ScriptFormatError(f"label cannot contain whitespace or ')': {label!r}")
    return f'{marker} ({label}) "{text}"'


def dump_script(prompts: Sequence[Prompt]) -> str:
    """
    Serialize prompts to the script text format.

    Raises:
        ScriptFormatError: If a text or label cannot be written back
    """
    blocks = []
    for prompt in prompts:
        lines = [_format_line(PROMPT_MARKER, prompt.text, prompt.label)]
        for response in prompt.responses:
            lines.append(_format_line(RESPONSE_MARKER, response.text, response.label))
        blocks.append("\n".join(lines))

    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def script_to_json(prompts: Sequence[Prompt], script_id: Optional[str] = None) -> dict[str, Any]:
    """Convert prompts to a JSON-compatible dict."""
    return {
        'id': script_id,
        'prompts': [prompt.model_dump(mode='json') for prompt in prompts],
    }


def script_from_json(data: Any) -> list[Prompt]:
    """
    Build prompts from a compiled JSON document.

    Raises:
        ScriptFormatError: If the document does not match the schema
    """
    try:
        jsonschema.validate(instance=data, schema=load_schema())
    except jsonschema.ValidationError as e:
        raise ScriptFormatError(f"invalid script document: {e.message}") from e

    try:
        return [Prompt.model_validate(item) for item in data['prompts']]
    except ValidationError as e:
        raise ScriptFormatError(f"invalid script document: {e}") from e


def save_json(prompts: Sequence[Prompt], path: str | Path, script_id: Optional[str] = None) -> None:
    """Save prompts as JSON."""
    path = Path(path)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(script_to_json(prompts, script_id), f, indent=2, ensure_ascii=False)


def load_json(path: str | Path) -> list[Prompt]:
    """Load prompts from a compiled JSON file."""
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ScriptFormatError(f"{path}: {e}") from e
    return script_from_json(data)


def compile_script_file(
    input_path: str | Path,
    output_path: Optional[str | Path] = None,
    encoding: str = "utf-8",
) -> Path:
    """
    Compile a text script to JSON.

    Args:
        input_path: Path to the script text file
        output_path: Path to the output .json file (default: same name with .json)

    Returns:
        The path written
    """
    input_path = Path(input_path)
    if output_path is None:
        output_path = input_path.with_suffix('.json')
    else:
        output_path = Path(output_path)

    prompts = parse_file(input_path, encoding=encoding)
    save_json(prompts, output_path, script_id=input_path.stem)
    return output_path
