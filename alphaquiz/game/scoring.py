from __future__ import annotations

"""Presentation, answer parsing and partial-credit scoring."""

import random
from typing import AbstractSet, FrozenSet, List, Sequence, Tuple

from ..quiz.models import OPTIONS, Answer, Question

MAX_POINTS = 12
DEFAULT_SEPARATOR = "/"


def present_question(question: Question, rng: random.Random) -> List[Tuple[str, str]]:
    """Shuffle the answers in place and letter them A-D.

    Returns (option, description) pairs in display order.
    """
    rng.shuffle(question.answers)
    pairs: List[Tuple[str, str]] = []
    for option, answer in zip(OPTIONS, question.answers):
        answer.option = option
        pairs.append((option, answer.description))
    return pairs


def parse_answer(raw: str, separator: str = DEFAULT_SEPARATOR) -> Tuple[FrozenSet[str], bool]:
    """Parse a slash-separated selection such as ``"a/C"``.

    Case-insensitive, order-insensitive, duplicates collapse. Any token that
    is not exactly one of A-D (including an empty one) makes the whole input
    invalid.
    """
    tokens = raw.rstrip("\r\n").upper().split(separator)
    selected = set()
    for token in tokens:
        if token not in OPTIONS:
            return frozenset(), False
        selected.add(token)
    return frozenset(selected), True


def correct_option(answers: Sequence[Answer]) -> str:
    """Letter currently assigned to the single correct answer."""
    for ans in answers:
        if ans.is_correct:
            return ans.option
    raise ValueError("question has no correct answer")


def score(answers: Sequence[Answer], selections: AbstractSet[str], max_points: int = MAX_POINTS) -> int:
    """Points for one response: ``max_points // len(selections)`` on a hit, else 0.

    Hedging over more letters dilutes the reward: 12, 6, 4, 3 for one to
    four letters with the default maximum.
    """
    if not selections:
        raise ValueError("selections must not be empty")
    if correct_option(answers) in selections:
        return max_points // len(selections)
    return 0
