from __future__ import annotations

from typing import TYPE_CHECKING

from statemachine import State, StateMachine

from lights_out.models import GamePhase

if TYPE_CHECKING:
    from lights_out.core.game_loop import GameSession


class GameFSM(StateMachine):
    """FSM wrapper around GameSession.

    - phases: playing -> won | quit
    - the loop applies moves to the grid; the FSM only guards transitions.
    """

    playing = State(GamePhase.playing.value, value=GamePhase.playing.value, initial=True)
    won = State(GamePhase.won.value, value=GamePhase.won.value, final=True)
    quit = State(GamePhase.quit.value, value=GamePhase.quit.value, final=True)

    move = playing.to.itself()
    reject = playing.to.itself()
    win = playing.to(won)
    leave = playing.to(quit)

    def __init__(self, session: GameSession):
        self.session = session
        super().__init__(start_value=session.phase.value)

    @property
    def is_over(self) -> bool:
        return bool(self.current_state.final)

    def sync_phase_to_model(self) -> None:
        self.session.phase = GamePhase(str(self.current_state.value))
