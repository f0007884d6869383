"""Typed console commands.

Commands carry data only. They are produced by
:func:`charwin.domain.parser.parse_command` and consumed by the console
service's dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass

from charwin.domain.geometry import Point
from charwin.domain.shapes import Shape


@dataclass(frozen=True, slots=True)
class Print:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class Help:
    pass


@dataclass(frozen=True, slots=True)
class Clear:
    pass


@dataclass(frozen=True, slots=True)
class ListShapes:
    """List the registered shapes."""


@dataclass(frozen=True, slots=True)
class Fill:
    char: str


@dataclass(frozen=True, slots=True)
class Replace:
    old: str
    new: str


@dataclass(frozen=True, slots=True)
class New:
    """Replace the window with a fresh one of the given size."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class NewShape:
    """Register a shape so ``draw`` can refer to it by index."""

    shape: Shape


@dataclass(frozen=True, slots=True)
class Draw:
    shape_index: int
    origin: Point
    glyph: str


Command = (
    Print
    | Quit
    | Help
    | Clear
    | ListShapes
    | Fill
    | Replace
    | New
    | Resize
    | NewShape
    | Draw
)
