from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from lights_out.core.events import GameEvent
from lights_out.core.grid import GridState, Snapshot
from lights_out.fsm import GameFSM
from lights_out.models import GamePhase
from lights_out.turn_processing.validators import QUIT_SELECTION, InvalidSelection, parse_selection

logger = logging.getLogger(__name__)

PROMPT = "Choose a Window (0 to exit): "
INVALID_MESSAGE = "INVALID SELECTION!"
WIN_MESSAGE = "Congratulations!  You won!"
GOODBYE_MESSAGE = "Goodbye!"

Renderer = Callable[[Snapshot], None]
KeyReader = Callable[[], str]
Writer = Callable[[str], None]


@dataclass(slots=True)
class GameSession:
    grid: GridState = field(default_factory=GridState.initial)
    phase: GamePhase = GamePhase.playing
    moves: int = 0
    history: list[GameEvent] = field(default_factory=list)

    def record(self, event: GameEvent) -> None:
        self.history.append(event)
        logger.debug("%s move=%d %s", event.type, event.move, event.payload)


def play_key(*, session: GameSession, fsm: GameFSM, key: str) -> str | None:
    """Apply one keypress to the session.

    Returns the message to show the player, if any. The win check is left to
    the loop so the solved grid is rendered before the game ends.
    """

    try:
        selection = parse_selection(key, phase=session.phase)
    except InvalidSelection as e:
        fsm.reject()
        session.record(GameEvent.now(type="SELECTION_REJECTED", move=session.moves, payload={"key": key, "reason": str(e)}))
        return INVALID_MESSAGE

    if selection == QUIT_SELECTION:
        fsm.leave()
        fsm.sync_phase_to_model()
        session.record(GameEvent.now(type="GAME_QUIT", move=session.moves, payload={}))
        return None

    toggled = session.grid.apply_move(selection)
    session.moves += 1
    fsm.move()
    session.record(
        GameEvent.now(
            type="MOVE_APPLIED",
            move=session.moves,
            payload={"window": selection, "toggled": toggled, "lit": session.grid.lit_count()},
        )
    )
    return None


def run_game(*, session: GameSession, render: Renderer, read_selection: KeyReader, write: Writer) -> GamePhase:
    """Drive turns until the puzzle is solved or the player quits.

    Each iteration: render, check for a win, prompt, read one key, apply it.
    """

    fsm = GameFSM(session)

    while not fsm.is_over:
        render(session.grid.snapshot())

        if session.grid.is_solved():
            fsm.win()
            fsm.sync_phase_to_model()
            session.record(GameEvent.now(type="GAME_WON", move=session.moves, payload={}))
            write(WIN_MESSAGE + "\n")
            break

        write(PROMPT)
        message = play_key(session=session, fsm=fsm, key=read_selection())
        if message:
            write(message + "\n")

    write(GOODBYE_MESSAGE + "\n")
    logger.info("Game over: phase=%s moves=%d", session.phase.value, session.moves)
    return session.phase
