from __future__ import annotations

"""CLI for alphaquiz: play or validate a question file."""

import argparse
import sys
from typing import Any, Callable, Dict, Optional

from .. import __version__
from ..config.config import QuizSettings, load_config, validate_config
from ..game.runner import QuizRunner
from ..quiz.builder import build_quiz
from ..quiz.errors import QuizError
from ..quiz.loader import read_quiz_file
from ..quiz.models import Quiz
from ..stats.stats import format_summary
from ..util.randomness import make_rng
from . import explain
from .explain import trace as xtrace


def intro(separator: str = "/") -> str:
    """Game rules shown before the first question."""
    return "\n".join(
        [
            "Hello!",
            "\t1. Only one answer is correct",
            "\t2. Pick every answer you think might be correct",
            "",
            f"How to answer: options are A/B/C/D, type each option you pick separated by '{separator}'",
            'For example, if you are sure the answer is B, type "B"',
            f'But if you are torn between A and C, type "A{separator}C"',
            "",
            f"Scoring: a single correct letter earns full points, hedging splits them (A{separator}C earns half).",
            f"Note: the order of the options does not matter. A{separator}C and C{separator}A are the same answer.",
            "",
        ]
    )


def _build_ui() -> Dict[str, Callable[..., Any]]:
    def ask(prompt: str) -> str:
        return input(prompt)

    def inform(msg: str) -> None:
        print(msg)

    return {"ask": ask, "inform": inform}


def _settings_from_args(args: argparse.Namespace) -> QuizSettings:
    settings = validate_config(load_config(args.config))
    updates: Dict[str, Any] = {}
    if args.questions is not None:
        updates["questions_path"] = args.questions
    if args.order is not None:
        updates["order"] = args.order
    if getattr(args, "seed", None) is not None:
        updates["seed"] = args.seed
    if getattr(args, "no_intro", False):
        updates["show_intro"] = False
    return settings.model_copy(update=updates)


def _load_quiz(settings: QuizSettings) -> Quiz:
    raw = read_quiz_file(settings.questions_path)
    quiz = build_quiz(raw, order=settings.order)
    xtrace("quiz_loaded", {"path": settings.questions_path, "questions": len(quiz), "order": settings.order})
    return quiz


def _cmd_run(args: argparse.Namespace) -> int:
    settings = _settings_from_args(args)
    quiz = _load_quiz(settings)

    if settings.show_intro:
        print(intro(settings.separator))

    runner = QuizRunner(
        quiz,
        make_rng(settings.seed),
        max_points=settings.max_points,
        separator=settings.separator,
        show_running_score=settings.show_running_score,
    )
    result = runner.run(_build_ui())

    print()
    print(f"Game over! Your score is: {result.score}")
    print("\nSession Summary:")
    print(format_summary(result.stats))
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    settings = _settings_from_args(args)
    quiz = _load_quiz(settings)
    for question in quiz:
        print(f"{question.key}: {question.description}")
    print(f"{len(quiz)} question(s) OK in {settings.questions_path}")
    return 0


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", default=None, help="Path to YAML config")
    parser.add_argument("--questions", default=None, help="Question file (.json, .yml, .yaml)")
    parser.add_argument("--order", choices=["file", "key"], default=None, help="Question order")
    parser.add_argument("--explain", action="store_true", help="Print trace lines at milestones")


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="alphaquiz")
    p.add_argument("--version", action="version", version=f"alphaquiz {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    rp = sub.add_parser("run", help="Play a quiz")
    _add_common(rp)
    rp.add_argument("--seed", type=int, default=None, help="Seed for option shuffling")
    rp.add_argument("--no-intro", dest="no_intro", action="store_true", help="Skip the instructions")

    vp = sub.add_parser("validate", help="Load and check a question file without playing")
    _add_common(vp)

    args = p.parse_args(argv)
    explain.enable(bool(args.explain))

    handlers = {"run": _cmd_run, "validate": _cmd_validate}
    try:
        return handlers[args.cmd](args)
    except QuizError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
