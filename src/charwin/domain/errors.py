"""Parser error taxonomy.

Every rejection the parser can produce is one of the classes below. Each
keeps the offending raw text so the caller can show the user exactly what
was wrong, and a stable ``code`` used in service results.
"""

from __future__ import annotations

from typing import ClassVar


class ParseError(ValueError):
    """Base class for all input rejections."""

    code: ClassVar[str] = "PARSE_ERROR"
    template: ClassVar[str] = '"{raw}" could not be parsed'

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(self.template.format(raw=raw))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return type(self) is type(other) and self.raw == other.raw

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.raw))


class InvalidCommand(ParseError):
    code = "INVALID_COMMAND"
    template = '"{raw}" is not a valid command.'


class TooManyArguments(ParseError):
    code = "TOO_MANY_ARGUMENTS"
    template = '"{raw}", too many arguments!'


class MissingArguments(ParseError):
    code = "MISSING_ARGUMENTS"
    template = '"{raw}", missing arguments!'


class NotNumber(ParseError):
    code = "NOT_NUMBER"
    template = '"{raw}", not a valid number!'


class NonPositiveInteger(ParseError):
    code = "NON_POSITIVE_INTEGER"
    template = "\"{raw}\", can't have numbers below 1!"


class InvalidShapeType(ParseError):
    code = "INVALID_SHAPE_TYPE"
    template = '"{raw}" is not a valid shape type'
