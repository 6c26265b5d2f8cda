from __future__ import annotations

import logging
import random
import sys
from collections.abc import Mapping
from typing import TextIO

from lights_out.config import load_dotenv_if_present, load_settings
from lights_out.core.game_loop import GOODBYE_MESSAGE, GameSession, run_game
from lights_out.core.grid import GridState, Snapshot
from lights_out.core.house_text import render_house
from lights_out.infra.terminal import make_key_reader, raw_input_mode
from lights_out.models import GameSettings

logger = logging.getLogger(__name__)


def build_session(settings: GameSettings) -> GameSession:
    if settings.scramble_moves:
        grid = GridState()
        applied = grid.scramble(rng=random.Random(settings.seed), moves=settings.scramble_moves)
        logger.debug("Scrambled start layout with moves=%s", applied)
    else:
        grid = GridState.from_layout(settings.initial_layout)
    return GameSession(grid=grid)


def main(*, stdin: TextIO | None = None, stdout: TextIO | None = None, environ: Mapping[str, str] | None = None) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout

    if environ is None:
        load_dotenv_if_present()
    settings = load_settings(environ)

    # Log to stderr so records never interleave with the frame on stdout.
    logging.basicConfig(level=getattr(logging, settings.log_level), stream=sys.stderr)

    session = build_session(settings)

    def render(grid: Snapshot) -> None:
        out.write(render_house(grid) + "\n")
        out.flush()

    def write(text: str) -> None:
        out.write(text)
        out.flush()

    try:
        with raw_input_mode(stdin, enabled=settings.raw_input) as single_key:
            read_selection = make_key_reader(stream=stdin, out=out, single_key=single_key)
            run_game(session=session, render=render, read_selection=read_selection, write=write)
    except KeyboardInterrupt:
        write("\n" + GOODBYE_MESSAGE + "\n")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
