from .models import OPTIONS, Answer, AnswerKind, Question, Quiz
from .builder import REQUIRED_FIELDS, build_question, build_quiz
from .loader import read_quiz_file
from .errors import (
    QuizError,
    FileReadError,
    ParseError,
    MissingFieldError,
    InvalidQuestionFormatError,
    InputClosedError,
    ConfigError,
)

__all__ = [
    "OPTIONS",
    "Answer",
    "AnswerKind",
    "Question",
    "Quiz",
    "REQUIRED_FIELDS",
    "build_question",
    "build_quiz",
    "read_quiz_file",
    "QuizError",
    "FileReadError",
    "ParseError",
    "MissingFieldError",
    "InvalidQuestionFormatError",
    "InputClosedError",
    "ConfigError",
]
