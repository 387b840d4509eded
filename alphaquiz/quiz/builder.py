from __future__ import annotations

"""Turn raw, loosely-typed question records into a validated Quiz.

Both entry points fail fast: the first bad record aborts construction and
no partial quiz is ever returned.
"""

from typing import Any, Dict, Mapping

from .errors import InvalidQuestionFormatError, MissingFieldError
from .models import Answer, Question, Quiz

WRONG_FIELDS = ("wrong1", "wrong2", "wrong3")
REQUIRED_FIELDS = ("description", "correct") + WRONG_FIELDS
ALLOWED_ORDERS = {"file", "key"}


def build_question(raw: Mapping[str, str], key: str = "") -> Question:
    """Build a Question from a flat string mapping.

    Answers come out in the fixed order [correct, wrong1, wrong2, wrong3];
    shuffling happens at presentation time. Unknown keys are ignored.

    Raises:
        MissingFieldError: naming the first required field that is absent.
    """
    for name in REQUIRED_FIELDS:
        if name not in raw:
            raise MissingFieldError(name)

    answers = [Answer.correct(raw["correct"])]
    answers.extend(Answer.wrong(raw[name]) for name in WRONG_FIELDS)
    return Question(description=raw["description"], answers=answers, key=key)


def _as_flat_record(key: str, value: Any) -> Dict[str, str]:
    if not isinstance(value, Mapping):
        raise InvalidQuestionFormatError(key)
    record: Dict[str, str] = {}
    for inner_key, inner_val in value.items():
        if not isinstance(inner_key, str) or not isinstance(inner_val, str):
            raise InvalidQuestionFormatError(key)
        record[inner_key] = inner_val
    return record


def build_quiz(raw_records: Mapping[str, Any], order: str = "file") -> Quiz:
    """Build a Quiz from every top-level record.

    Args:
        raw_records: mapping of question identifier to raw record.
        order: ``"file"`` keeps the mapping's iteration order (document order
            for parsed JSON/YAML), ``"key"`` sorts by identifier.
    """
    if order not in ALLOWED_ORDERS:
        raise ValueError(f"unknown question order '{order}'")

    items = list(raw_records.items())
    if order == "key":
        items.sort(key=lambda kv: str(kv[0]))

    quiz = Quiz()
    for key, value in items:
        key = str(key)
        record = _as_flat_record(key, value)
        try:
            question = build_question(record, key=key)
        except MissingFieldError as exc:
            raise MissingFieldError(exc.field, key=key) from exc
        quiz.questions.append(question)
    return quiz
