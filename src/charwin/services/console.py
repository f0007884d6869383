"""ConsoleService — owns the window and the shape registry.

One service instance is one console session: a single :class:`Grid`
plus the ordered list of shapes registered with ``new shape``. Lines are
parsed and applied one at a time; nothing here is shared across threads.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

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
from charwin.domain.errors import ParseError
from charwin.domain.grid import DEFAULT_FILL, MAX_CELLS, Grid
from charwin.domain.parser import parse_command
from charwin.domain.shapes import Shape
from charwin.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

HELP_TEXT = """\
help -> shows help
print -> prints current state of window
clear -> clears the terminal
list -> lists registered shapes with their index
new [WIDTH] [HEIGHT] -> creates new window with specified width and height
    (long form: new window [WIDTH] [HEIGHT])
new shape circle [RADIUS] -> registers a filled circle
new shape square [WIDTH] [HEIGHT] -> registers a filled rectangle
resize [WIDTH] [HEIGHT] -> resizes window to specified width and height \
retaining state of the visible parts of window
draw [INDEX] [X] [Y] [CHAR] -> draws registered shape INDEX at (X, Y) with CHAR
    example "draw 0 4 4 #"
fill [CHAR] -> fills whole window with CHAR
    example "fill #"
replace [OLD_CHAR] [NEW_CHAR] -> replaces OLD_CHAR with NEW_CHAR in window
quit -> quits"""


class ConsoleService:
    """Parse console lines and apply them to the session's grid.

    Usage::

        svc = ConsoleService(width=10, height=10)
        svc.execute("fill #")
        svc.execute("new shape circle 3")
        result = svc.execute("draw 0 5 5 o")
        print(result.data["grid"])
    """

    def __init__(
        self,
        width: int = 10,
        height: int = 10,
        *,
        fill: str = DEFAULT_FILL,
        auto_print: bool = True,
    ) -> None:
        self._fill = fill
        self._auto_print = auto_print
        self._grid = Grid(width, height, fill)
        self._shapes: list[Shape] = []
        self._handlers: dict[type, Callable[[Any], ServiceResult]] = {
            Print: self._print,
            Quit: self._quit,
            Help: self._help,
            Clear: self._clear,
            ListShapes: self._list,
            Fill: self._fill_cmd,
            Replace: self._replace,
            New: self._new,
            Resize: self._resize,
            NewShape: self._new_shape,
            Draw: self._draw,
        }

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def shapes(self) -> tuple[Shape, ...]:
        return tuple(self._shapes)

    # --- Entry points ---

    def execute(self, line: str) -> ServiceResult:
        """Parse *line* and apply it. Parse failures become error results."""
        try:
            command = parse_command(line)
        except ParseError as exc:
            logger.debug("Rejected %r: %s", line, exc)
            return ServiceResult(
                ok=False,
                op="parse",
                error=ServiceError(
                    code=exc.code,
                    message=str(exc),
                    detail={"raw": exc.raw, "line": line.strip()},
                ),
            )
        return self.apply(command)

    def apply(self, command: Command) -> ServiceResult:
        """Dispatch an already parsed command."""
        logger.debug("Applying %r", command)
        return self._handlers[type(command)](command)

    # --- Handlers ---

    def _grid_data(self, message: str, *, force: bool = False, **extra: Any) -> dict[str, Any]:
        data: dict[str, Any] = {"message": message, **extra}
        data["width"] = self._grid.width
        data["height"] = self._grid.height
        if force or self._auto_print:
            data["grid"] = self._grid.render()
        return data

    def _print(self, _cmd: Print) -> ServiceResult:
        data = self._grid_data("Printing window.", force=True)
        return ServiceResult(ok=True, op="print", data=data)

    def _quit(self, _cmd: Quit) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="quit",
            data={"message": "See you again next time!", "exit": True},
        )

    def _help(self, _cmd: Help) -> ServiceResult:
        return ServiceResult(ok=True, op="help", data={"text": HELP_TEXT})

    def _clear(self, _cmd: Clear) -> ServiceResult:
        return ServiceResult(ok=True, op="clear", data={"message": "clearing terminal"})

    def _list(self, _cmd: ListShapes) -> ServiceResult:
        items = [
            {"index": i, "kind": str(shape.kind), "description": shape.describe()}
            for i, shape in enumerate(self._shapes)
        ]
        message = f"{len(items)} shape(s) registered"
        return ServiceResult(ok=True, op="list", data={"message": message, "items": items})

    def _fill_cmd(self, cmd: Fill) -> ServiceResult:
        self._grid.fill(cmd.char)
        data = self._grid_data(f"window filled with {cmd.char}")
        return ServiceResult(ok=True, op="fill", data=data)

    def _replace(self, cmd: Replace) -> ServiceResult:
        changed = self._grid.replace(cmd.old, cmd.new)
        data = self._grid_data(f"'{cmd.old}' replaced with '{cmd.new}'", changed=changed)
        return ServiceResult(ok=True, op="replace", data=data)

    def _size_error(self, op: str, width: int, height: int, exc: ValueError) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="WINDOW_TOO_LARGE",
                message=str(exc),
                detail={"width": width, "height": height, "max_cells": MAX_CELLS},
            ),
        )

    def _new(self, cmd: New) -> ServiceResult:
        try:
            self._grid = Grid(cmd.width, cmd.height, self._fill)
        except ValueError as exc:
            return self._size_error("new", cmd.width, cmd.height, exc)
        message = f"Made new window with {cmd.width} width and {cmd.height} height"
        return ServiceResult(ok=True, op="new", data=self._grid_data(message))

    def _resize(self, cmd: Resize) -> ServiceResult:
        try:
            self._grid.resize(cmd.width, cmd.height)
        except ValueError as exc:
            return self._size_error("resize", cmd.width, cmd.height, exc)
        message = f"Resized window to {cmd.width} width and {cmd.height} height"
        return ServiceResult(ok=True, op="resize", data=self._grid_data(message))

    def _new_shape(self, cmd: NewShape) -> ServiceResult:
        self._shapes.append(cmd.shape)
        index = len(self._shapes) - 1
        message = f"Registered shape {index}: {cmd.shape.describe()}"
        data = {"message": message, "index": index, "kind": str(cmd.shape.kind)}
        return ServiceResult(ok=True, op="new_shape", data=data)

    def _draw(self, cmd: Draw) -> ServiceResult:
        if cmd.shape_index >= len(self._shapes):
            return ServiceResult(
                ok=False,
                op="draw",
                error=ServiceError(
                    code="UNKNOWN_SHAPE",
                    message=(
                        f"No shape with index {cmd.shape_index} "
                        f"({len(self._shapes)} registered, see 'list')"
                    ),
                    detail={"index": cmd.shape_index},
                ),
            )
        shape = self._shapes[cmd.shape_index]
        drawn, clipped = self._grid.draw(cmd.origin, shape, cmd.glyph)
        warnings: list[str] = []
        if clipped:
            warnings.append("Part of the shape fell outside the window and was clipped")
        message = f"Drew {shape.describe()} at {cmd.origin} with '{cmd.glyph}'"
        data = self._grid_data(message, drawn=drawn, clipped=clipped)
        return ServiceResult(ok=True, op="draw", data=data, warnings=warnings)
