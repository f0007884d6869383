"""Console line parser.

Turns one line of input into a :mod:`~charwin.domain.commands` value or
raises a :class:`~charwin.domain.errors.ParseError`. Performs no I/O.

Grammar (case-sensitive, single-space separated, no quoting)::

    print | quit | help | clear | list
    fill <char>
    replace <old> <new>
    new <width> <height>
    new window <width> <height>
    new shape circle <radius>
    new shape square <width> <height>
    resize <width> <height>
    draw <shape_index> <x> <y> <glyph>

Arguments are checked for arity first, then type, then range.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from charwin.domain.commands import (
    Clear,
    Command,
    Draw,
    Fill,
    Help,
    ListShapes,
    New,
    NewShape,
    Print,
    Quit,
    Replace,
    Resize,
)
from charwin.domain.errors import (
    InvalidCommand,
    InvalidShapeType,
    MissingArguments,
    NonPositiveInteger,
    NotNumber,
    TooManyArguments,
)
from charwin.domain.geometry import Point
from charwin.domain.shapes import Circle, Shape, ShapeKind, Square

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"\+?[0-9]+")

# Machine-word ranges: out-of-range tokens are not numbers.
INT_MIN, INT_MAX = -(2**63), 2**63 - 1
UINT_MAX = 2**64 - 1
_MAX_DIGITS = len(str(UINT_MAX))

ZERO_ARG_COMMANDS: dict[str, Command] = {
    "print": Print(),
    "quit": Quit(),
    "help": Help(),
    "clear": Clear(),
    "list": ListShapes(),
}


def parse_command(line: str) -> Command:
    """Parse a single console line.

    Surrounding whitespace is ignored. The first space separates the
    keyword from its arguments.

    Raises:
        ParseError: one of its subclasses, carrying the offending text.
    """
    line = line.strip()
    keyword, sep, args = line.partition(" ")
    if not sep:
        command = ZERO_ARG_COMMANDS.get(keyword)
        if command is None:
            raise InvalidCommand(line)
        return command
    if keyword in ZERO_ARG_COMMANDS:
        raise TooManyArguments(line)
    handler = _HANDLERS.get(keyword)
    if handler is None:
        raise InvalidCommand(line)
    return handler(line, args.split(" "))


# --- Token helpers ---


def _check_arity(tokens: list[str], expected: int, line: str) -> None:
    if len(tokens) > expected:
        raise TooManyArguments(line)
    if len(tokens) < expected:
        raise MissingArguments(line)


def _char(token: str) -> str:
    """Exactly one code point."""
    if not token:
        raise MissingArguments(token)
    if len(token) > 1:
        raise TooManyArguments(token)
    return token


def _decimal(token: str, pattern: re.Pattern[str], low: int, high: int) -> int | None:
    if pattern.fullmatch(token) is None:
        return None
    digits = token.lstrip("+-").lstrip("0") or "0"
    # int() rejects overlong digit strings.
    if len(digits) > _MAX_DIGITS:
        return None
    value = -int(digits) if token.startswith("-") else int(digits)
    return value if low <= value <= high else None


def _int(token: str, raw: str) -> int:
    """Signed 64-bit decimal."""
    value = _decimal(token, _INT_RE, INT_MIN, INT_MAX)
    if value is None:
        raise NotNumber(raw)
    return value


def _uint(token: str) -> int:
    """Unsigned 64-bit decimal, reported with the token itself."""
    value = _decimal(token, _UINT_RE, 0, UINT_MAX)
    if value is None:
        raise NotNumber(token)
    return value


def _dimensions(tokens: list[str], line: str) -> tuple[int, ...]:
    """Parse positive integer magnitudes, reporting errors with the joined tokens."""
    raw = " ".join(tokens)
    values = tuple(_int(token, raw) for token in tokens)
    if any(v <= 0 for v in values):
        raise NonPositiveInteger(raw)
    return values


# --- Per-keyword handlers ---


def _parse_fill(line: str, tokens: list[str]) -> Command:
    _check_arity(tokens, 1, line)
    return Fill(_char(tokens[0]))


def _parse_replace(line: str, tokens: list[str]) -> Command:
    _check_arity(tokens, 2, line)
    return Replace(_char(tokens[0]), _char(tokens[1]))


def _parse_new(line: str, tokens: list[str]) -> Command:
    head = tokens[0]
    if head == "shape":
        return NewShape(_parse_shape(line, tokens[1:]))
    if head == "window":
        tokens = tokens[1:]
    _check_arity(tokens, 2, line)
    width, height = _dimensions(tokens, line)
    return New(width, height)


def _parse_shape(line: str, tokens: list[str]) -> Shape:
    if not tokens:
        raise MissingArguments(line)
    kind, params = tokens[0], tokens[1:]
    if kind == ShapeKind.CIRCLE:
        _check_arity(params, 1, line)
        (radius,) = _dimensions(params, line)
        return Circle(radius)
    if kind == ShapeKind.SQUARE:
        _check_arity(params, 2, line)
        width, height = _dimensions(params, line)
        return Square(width, height)
    raise InvalidShapeType(kind)


def _parse_resize(line: str, tokens: list[str]) -> Command:
    _check_arity(tokens, 2, line)
    width, height = _dimensions(tokens, line)
    return Resize(width, height)


def _parse_draw(line: str, tokens: list[str]) -> Command:
    _check_arity(tokens, 4, line)
    index_tok, x_tok, y_tok, glyph_tok = tokens
    index = _uint(index_tok)
    x = _int(x_tok, x_tok)
    y = _int(y_tok, y_tok)
    return Draw(index, Point(x, y), _char(glyph_tok))


_HANDLERS: dict[str, Callable[[str, list[str]], Command]] = {
    "fill": _parse_fill,
    "replace": _parse_replace,
    "new": _parse_new,
    "resize": _parse_resize,
    "draw": _parse_draw,
}

KEYWORDS: tuple[str, ...] = (*ZERO_ARG_COMMANDS, *_HANDLERS)
