from __future__ import annotations

"""Error taxonomy for loading, building and playing a quiz."""


class QuizError(Exception):
    pass


class FileReadError(QuizError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot read question file {path}: {reason}")
        self.path = path


class ParseError(QuizError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot parse question file {path}: {reason}")
        self.path = path


class MissingFieldError(QuizError):
    """A question record lacks one of the required fields.

    ``key`` is the offending record identifier once the error has passed
    through :func:`~alphaquiz.quiz.builder.build_quiz`, ``None`` before.
    """

    def __init__(self, field: str, key: str | None = None) -> None:
        self.field = field
        self.key = key
        if field == "description":
            detail = "no question description provided"
        else:
            detail = f"no {field} answer provided"
        if key is not None:
            detail = f"invalid in question {key}: {detail}"
        super().__init__(detail)


class InvalidQuestionFormatError(QuizError):
    def __init__(self, key: str) -> None:
        super().__init__(f"invalid question format on {key}")
        self.key = key


class InputClosedError(QuizError):
    pass


class ConfigError(QuizError):
    pass
