from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from lights_out.models import GamePhase

QUIT_SELECTION = 0


class InvalidSelection(ValueError):
    """Raised for any keypress that is not a digit '0'-'9'."""


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """Inputs available to validators.

    Keep this tight so we can safely log it.
    """

    key: str
    phase: GamePhase


class SelectionValidator(ABC):
    """A small, composable validation unit for a keypress."""

    @abstractmethod
    def validate(self, *, ctx: ValidationContext) -> None:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class SingleKeyValidator(SelectionValidator):
    def validate(self, *, ctx: ValidationContext) -> None:
        if len(ctx.key) != 1:
            raise InvalidSelection(f"Expected exactly one key, got {ctx.key!r}")


@dataclass(frozen=True, slots=True)
class DigitValidator(SelectionValidator):
    # str.isdigit() also accepts other unicode digits; only ASCII windows exist.
    allowed: frozenset[str] = frozenset("0123456789")

    def validate(self, *, ctx: ValidationContext) -> None:
        if ctx.key not in self.allowed:
            raise InvalidSelection(f"Not a window number: {ctx.key!r}")


@dataclass(frozen=True, slots=True)
class PhaseValidator(SelectionValidator):
    """Selections are only meaningful while the puzzle is being played."""

    allowed_phases: frozenset[GamePhase] = frozenset({GamePhase.playing})

    def validate(self, *, ctx: ValidationContext) -> None:
        if ctx.phase not in self.allowed_phases:
            raise ValueError(f"Selection not allowed in phase '{ctx.phase.value}'")


@dataclass(frozen=True, slots=True)
class ValidatorPipeline:
    validators: tuple[SelectionValidator, ...]

    def validate(self, *, ctx: ValidationContext) -> None:
        for v in self.validators:
            v.validate(ctx=ctx)


DEFAULT_PIPELINE = ValidatorPipeline(
    validators=(
        PhaseValidator(),
        SingleKeyValidator(),
        DigitValidator(),
    )
)


def parse_selection(key: str, *, phase: GamePhase = GamePhase.playing, pipeline: ValidatorPipeline = DEFAULT_PIPELINE) -> int:
    """Validate a keypress and return the selection (0 = quit, 1-9 = window)."""

    pipeline.validate(ctx=ValidationContext(key=key, phase=phase))
    return int(key)
