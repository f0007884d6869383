"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, charwin.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from charwin.domain.grid import check_size


class WindowConfig(BaseModel):
    """[window] section — the window created at startup."""

    model_config = {"frozen": True}

    width: int = Field(default=10, ge=1)
    height: int = Field(default=10, ge=1)
    fill: str = "."

    @field_validator("fill")
    @classmethod
    def _single_char(cls, value: str) -> str:
        if len(value) != 1:
            msg = "fill must be exactly one character"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _within_cell_limit(self) -> WindowConfig:
        check_size(self.width, self.height)
        return self


class ConsoleConfig(BaseModel):
    """[console] section."""

    model_config = {"frozen": True}

    prompt: str = "> "
    auto_print: bool = True
    greeting: bool = True
