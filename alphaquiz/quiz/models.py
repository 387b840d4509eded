from __future__ import annotations

"""Quiz data model: answers, questions and the quiz itself."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

OPTIONS = ("A", "B", "C", "D")


class AnswerKind(Enum):
    CORRECT = "correct"
    WRONG = "wrong"


@dataclass
class Answer:
    """One answer option.

    ``option`` is the display letter and is reassigned every time the
    owning question is presented.
    """

    kind: AnswerKind
    description: str
    option: str = ""

    @property
    def is_correct(self) -> bool:
        return self.kind is AnswerKind.CORRECT

    @classmethod
    def correct(cls, description: str) -> "Answer":
        return cls(AnswerKind.CORRECT, description)

    @classmethod
    def wrong(cls, description: str) -> "Answer":
        return cls(AnswerKind.WRONG, description)


@dataclass
class Question:
    description: str
    answers: List[Answer]
    key: str = ""

    def correct_answer(self) -> Answer:
        # Builder guarantees exactly one
        return next(a for a in self.answers if a.is_correct)


@dataclass
class Quiz:
    questions: List[Question] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.questions)

    def __iter__(self):
        return iter(self.questions)
