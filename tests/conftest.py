from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from lights_out.config import ENV_PREFIX, _ENV_FIELDS
from lights_out.core.game_loop import GameSession
from lights_out.core.grid import Snapshot


@pytest.fixture(autouse=True)
def _hermetic_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear `LIGHTS_OUT_*` so a developer's shell or `.env` can't leak into tests.

    Setting then deleting registers every variable with monkeypatch, so values
    written later (e.g. by load_dotenv) are removed on teardown too.
    """

    for suffix in _ENV_FIELDS:
        monkeypatch.setenv(f"{ENV_PREFIX}{suffix}", "")
        monkeypatch.delenv(f"{ENV_PREFIX}{suffix}")


@dataclass
class ScriptedIO:
    """In-memory stand-in for the render/read/write collaborators."""

    keys: list[str]
    frames: list[Snapshot] = field(default_factory=list)
    output: list[str] = field(default_factory=list)
    reads: int = 0

    def render(self, grid: Snapshot) -> None:
        self.frames.append(grid)

    def read_selection(self) -> str:
        if self.reads >= len(self.keys):
            raise AssertionError("read_selection called after the script ran out")
        key = self.keys[self.reads]
        self.reads += 1
        return key

    def write(self, text: str) -> None:
        self.output.append(text)


@pytest.fixture()
def session() -> GameSession:
    return GameSession()


@pytest.fixture()
def scripted():
    def _make(keys: str | list[str]) -> ScriptedIO:
        return ScriptedIO(keys=list(keys))

    return _make
