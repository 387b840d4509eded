from __future__ import annotations

"""Read raw question records from a JSON or YAML file."""

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import FileReadError, ParseError

YAML_SUFFIXES = {".yml", ".yaml"}


def read_quiz_file(path: str | Path) -> Dict[str, Any]:
    """Load the top-level mapping of question records from ``path``.

    ``.yml``/``.yaml`` files are parsed as YAML, anything else as JSON.

    Raises:
        FileReadError: the file is missing or unreadable.
        ParseError: the content is malformed or not a mapping at top level.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(str(p), str(exc)) from exc

    try:
        if p.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise ParseError(str(p), str(exc)) from exc

    if not isinstance(data, dict):
        raise ParseError(str(p), "top level must be a mapping of questions")
    return data
