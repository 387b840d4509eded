from __future__ import annotations

"""Configuration loading and validation for alphaquiz.

This module loads YAML configuration, applies defaults, and validates the
result into a typed settings model the CLI hands to the loader and runner.
"""

from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..quiz.errors import ConfigError


ALLOWED_ORDERS = {"file", "key"}
DEFAULTS_PATH = Path(__file__).with_name("defaults.yml")


class QuizSettings(BaseModel):
    questions_path: str
    order: Literal["file", "key"] = "file"
    max_points: int = Field(default=12, ge=1)
    separator: str = "/"
    show_intro: bool = True
    show_running_score: bool = True
    seed: Optional[int] = None

    @field_validator("separator")
    @classmethod
    def _single_char_separator(cls, v: str) -> str:
        if len(v) != 1 or v.isspace():
            raise ValueError("separator must be a single visible character")
        if v.upper() in {"A", "B", "C", "D"}:
            raise ValueError("separator must not be an answer letter")
        return v


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML or defaults.

    Args:
        path: Optional path to a YAML config. If None, use package defaults.

    Returns:
        A dictionary with configuration values.
    """
    if path:
        return _load_yaml(Path(path))
    return _load_yaml(DEFAULTS_PATH)


def validate_config(cfg: Dict[str, Any]) -> QuizSettings:
    """Apply defaults, fall back on unsupported values and build settings.

    Raises:
        ConfigError: when a value cannot be coerced into a valid setting.
    """
    for section in ("quiz", "scoring", "input", "ui"):
        if not isinstance(cfg.get(section), dict):
            cfg[section] = {}

    quiz = cfg["quiz"]
    scoring = cfg["scoring"]
    inp = cfg["input"]
    ui = cfg["ui"]

    quiz.setdefault("path", "./question.json")
    quiz.setdefault("order", "file")
    scoring.setdefault("max_points", 12)
    inp.setdefault("separator", "/")
    ui.setdefault("show_intro", True)
    ui.setdefault("show_running_score", True)
    cfg.setdefault("seed", None)

    order = quiz.get("order")
    if order not in ALLOWED_ORDERS:
        print(f"[WARN] Unsupported question order '{order}', using 'file'.")
        quiz["order"] = "file"

    try:
        return QuizSettings(
            questions_path=str(quiz["path"]),
            order=quiz["order"],
            max_points=scoring["max_points"],
            separator=inp["separator"],
            show_intro=ui["show_intro"],
            show_running_score=ui["show_running_score"],
            seed=cfg["seed"],
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
