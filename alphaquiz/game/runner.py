from __future__ import annotations

"""Interactive quiz loop and its result model."""

import random
from dataclasses import dataclass, field
from typing import Callable, Dict

from ..app.explain import trace as xtrace
from ..quiz.errors import InputClosedError
from ..quiz.models import Question, Quiz
from ..stats.stats import max_score, new_session_stats, update_stats
from .scoring import DEFAULT_SEPARATOR, MAX_POINTS, correct_option, parse_answer, present_question, score


@dataclass
class RunResult:
    """Outcome of a finished quiz run."""

    score: int
    total_questions: int
    max_score: int
    stats: Dict = field(default_factory=dict)


class QuizRunner:
    """Drives one run over a Quiz through ``ask``/``inform`` callbacks.

    ``ask(prompt)`` must return one line of user input and may raise
    ``EOFError`` or ``OSError``; either ends the run with
    :class:`InputClosedError`.
    """

    def __init__(
        self,
        quiz: Quiz,
        rng: random.Random,
        *,
        max_points: int = MAX_POINTS,
        separator: str = DEFAULT_SEPARATOR,
        show_running_score: bool = True,
    ) -> None:
        self.quiz = quiz
        self.rng = rng
        self.max_points = max_points
        self.separator = separator
        self.show_running_score = show_running_score

    def _read(self, ask: Callable[[str], str], prompt: str) -> str:
        try:
            return ask(prompt)
        except (EOFError, OSError) as exc:
            raise InputClosedError("Something went wrong reading your input. Please restart the game.") from exc

    def wait_for_start(self, ui: Dict[str, Callable]) -> None:
        self._read(ui["ask"], "Press ENTER when you're ready!\n")

    def present(self, question: Question, inform: Callable[[str], None]) -> None:
        pairs = present_question(question, self.rng)
        inform(f"Question: {question.description}")
        for option, description in pairs:
            inform(f"{option}. {description}")

    def ask_answer(self, ui: Dict[str, Callable], index: int) -> frozenset:
        ask = ui["ask"]
        while True:
            raw = self._read(ask, "Answer: ")
            selections, valid = parse_answer(raw, self.separator)
            if valid:
                return selections
            xtrace("answer_rejected", {"index": index, "input": raw})

    def run(self, ui: Dict[str, Callable]) -> RunResult:
        inform = ui["inform"]
        stats = new_session_stats(self.max_points)
        total = 0

        self.wait_for_start(ui)

        for i, question in enumerate(self.quiz.questions, 1):
            self.present(question, inform)
            xtrace(
                "question_presented",
                {"index": i, "key": question.key, "options": {a.option: a.description for a in question.answers}},
            )
            selections = self.ask_answer(ui, i)

            points = score(question.answers, selections, self.max_points)
            truth = correct_option(question.answers)
            xtrace("graded", {"index": i, "selected": sorted(selections), "truth": truth, "points": points})
            if points > 0:
                inform(f"Yes! Answer {truth} is correct")
            else:
                inform("Oops... your answer is wrong")

            total += points
            update_stats(stats, question.key or f"Q{i}", points, correct=points > 0)
            if self.show_running_score:
                inform(f"Your score: {total}")
            inform("")

        result = RunResult(
            score=total,
            total_questions=len(self.quiz.questions),
            max_score=max_score(stats),
            stats=stats,
        )
        xtrace("session_ended", {"score": result.score, "max_score": result.max_score})
        return result
