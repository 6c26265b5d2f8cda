from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator, model_validator


class GamePhase(StrEnum):
    playing = "playing"
    won = "won"
    quit = "quit"


class GameSettings(BaseModel):
    # Row-major, one character per window: "1" lit, "0" dark.
    initial_layout: str = Field(default="110110100", min_length=9, max_length=9)

    # Switch stdin to non-canonical mode so a single keypress is read without Enter.
    raw_input: bool = True

    log_level: str = "WARNING"

    # When > 0, the start layout is produced by this many random moves from all-dark.
    scramble_moves: int = Field(default=0, ge=0, le=100)
    seed: int | None = None

    @field_validator("initial_layout")
    @classmethod
    def _layout_bits(cls, v: str) -> str:
        if set(v) - {"0", "1"}:
            raise ValueError("initial_layout may only contain '0' and '1'")
        return v

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def _layout_or_scramble(self) -> "GameSettings":
        # A scrambled start replaces the layout entirely; asking for both is a config mistake.
        if self.scramble_moves and "initial_layout" in self.model_fields_set:
            raise ValueError("initial_layout and scramble_moves cannot both be set")
        return self
