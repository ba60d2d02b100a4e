"""
Script library.

Loads every dialogue script in a directory, keyed by file stem.
Text scripts are parsed; compiled ``.json`` scripts are validated
against the packaged schema.
"""

import logging
from pathlib import Path
from typing import Iterator, Optional

from promptgen.config import PromptgenConfig
from promptgen.core.errors import ParseError, ScriptFormatError
from promptgen.core.models import Prompt
from promptgen.core.parser import parse_file
from promptgen.core.writer import load_json


class ScriptLibrary:
    """
    Directory-backed collection of scripts.
    """

    def __init__(self, data_path: Path | str, config: Optional[PromptgenConfig] = None):
        self._data_path = Path(data_path)
        self.config = config or PromptgenConfig()
        self.scripts: dict[str, list[Prompt]] = {}

        self.logger = logging.getLogger(__name__)

    def load_all(self) -> None:
        """Load all scripts from disk. Files that fail to load are skipped."""
        self.scripts.clear()

        if not self._data_path.exists():
            self.logger.warning(f"Script directory not found: {self._data_path}")
            return

        suffixes = set(self.config.script_suffixes) | {self.config.compiled_suffix}
        for file_path in sorted(self._data_path.iterdir()):
            if not file_path.is_file() or file_path.suffix not in suffixes:
                continue

            script_id = file_path.stem
            if script_id in self.scripts:
                self.logger.warning(f"Duplicate script id {script_id!r}, ignoring {file_path}")
                continue

            try:
                self.scripts[script_id] = self.load_file(file_path)
            except ParseError as e:
                self.logger.error(f"Syntax error in {file_path}:{e}")
            except (ScriptFormatError, OSError, UnicodeDecodeError) as e:
                self.logger.error(f"Failed to load {file_path}: {e}")

        self.logger.info(f"Loaded {len(self.scripts)} scripts from {self._data_path}")

    def load_file(self, path: Path | str) -> list[Prompt]:
        """Load a single script, choosing the reader by suffix."""
        path = Path(path)
        if path.suffix == self.config.compiled_suffix:
            return load_json(path)
        return parse_file(path, encoding=self.config.encoding)

    def get(self, script_id: str) -> list[Prompt] | None:
        return self.scripts.get(script_id)

    def ids(self) -> list[str]:
        return sorted(self.scripts)

    def __contains__(self, script_id: str) -> bool:
        return script_id in self.scripts

    def __len__(self) -> int:
        return len(self.scripts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.ids())
