from __future__ import annotations

import io

import pytest

from lights_out.infra.terminal import UNDECODABLE_KEY, make_key_reader, raw_input_mode
from lights_out.turn_processing.validators import InvalidSelection, parse_selection

termios = pytest.importorskip("termios")


class _FakeTty(io.StringIO):
    def isatty(self) -> bool:
        return True

    def fileno(self) -> int:
        return 42


@pytest.fixture()
def fake_termios(monkeypatch: pytest.MonkeyPatch) -> list[tuple[int, int, list]]:
    calls: list[tuple[int, int, list]] = []
    original = [0, 0, 0, termios.ICANON | termios.ECHO, 0, 0, []]

    monkeypatch.setattr(termios, "tcgetattr", lambda fd: list(original))
    monkeypatch.setattr(termios, "tcsetattr", lambda fd, when, attrs: calls.append((fd, when, list(attrs))))
    return calls


def test_raw_mode_clears_icanon_and_restores(fake_termios) -> None:
    with raw_input_mode(_FakeTty()) as changed:
        assert changed is True
        assert len(fake_termios) == 1
        _, when, attrs = fake_termios[0]
        assert when == termios.TCSANOW
        assert not attrs[3] & termios.ICANON
        assert attrs[3] & termios.ECHO

    assert len(fake_termios) == 2
    fd, _, restored = fake_termios[1]
    assert fd == 42
    assert restored[3] == termios.ICANON | termios.ECHO


def test_raw_mode_restored_on_interrupt(fake_termios) -> None:
    with pytest.raises(KeyboardInterrupt):
        with raw_input_mode(_FakeTty()):
            raise KeyboardInterrupt

    assert len(fake_termios) == 2
    assert fake_termios[-1][2][3] & termios.ICANON


def test_raw_mode_is_noop_for_pipes(fake_termios) -> None:
    with raw_input_mode(io.StringIO("5")) as changed:
        assert changed is False
    assert fake_termios == []


def test_raw_mode_can_be_disabled(fake_termios) -> None:
    with raw_input_mode(_FakeTty(), enabled=False) as changed:
        assert changed is False
    assert fake_termios == []


def test_single_key_reader_echoes_newline() -> None:
    out = io.StringIO()
    read = make_key_reader(stream=io.StringIO("57"), out=out, single_key=True)

    assert read() == "5"
    assert read() == "7"
    assert out.getvalue() == "\n\n"
    with pytest.raises(EOFError):
        read()


def test_line_reader_returns_whole_line() -> None:
    read = make_key_reader(stream=io.StringIO("5\n12\n\n"), out=io.StringIO(), single_key=False)

    assert read() == "5"
    assert read() == "12"
    assert read() == ""
    with pytest.raises(EOFError):
        read()


class _UndecodableStream(io.StringIO):
    def read(self, size: int = -1) -> str:
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")


def test_undecodable_key_becomes_invalid_selection() -> None:
    out = io.StringIO()
    read = make_key_reader(stream=_UndecodableStream(), out=out, single_key=True)

    key = read()
    assert key == UNDECODABLE_KEY
    assert out.getvalue() == "\n"
    with pytest.raises(InvalidSelection):
        parse_selection(key)
