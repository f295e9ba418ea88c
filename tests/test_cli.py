"""Tests for argument handling and exit codes."""
from __future__ import annotations

from datetime import datetime
from typing import Any

import pytest

from keylights import cli, const
from keylights.delta import UNSET, SignedDelta
from keylights.errors import DeviceError
from keylights.runner import RunState


def test_defaults() -> None:
    args = cli.parse_args([])
    assert args.info is False
    assert args.circadian is False
    assert args.key_address == const.DEFAULT_KEY_ADDRESS
    assert args.fill_address == const.DEFAULT_FILL_ADDRESS
    assert args.key_brightness == UNSET
    assert args.fill_temperature == UNSET


def test_delta_flags() -> None:
    args = cli.parse_args(
        ["-bk", "80", "-tk", "+200", "-bf", "-10", "-tf", "", "-ak", "http://a:1"]
    )
    assert args.key_brightness == SignedDelta.absolute(80)
    assert args.key_temperature == SignedDelta.relative(200)
    assert args.fill_brightness == SignedDelta.relative(-10)
    assert args.fill_temperature == UNSET
    assert args.key_address == "http://a:1"


def test_long_flags() -> None:
    args = cli.parse_args(["--info", "--fill-brightness", "55"])
    assert args.info is True
    assert args.fill_brightness == SignedDelta.absolute(55)


def test_invalid_token_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.parse_args(["-bk", "bright"])
    assert exc.value.code == 2
    assert "invalid number 'bright'" in capsys.readouterr().err


def test_circadian_conflicts_with_explicit_values() -> None:
    with pytest.raises(SystemExit) as exc:
        cli.parse_args(["-c", "-tk", "4000"])
    assert exc.value.code == 2


def test_state_from_args_toggle() -> None:
    state = cli.state_from_args(cli.parse_args([]))
    assert isinstance(state, RunState)
    assert state.toggle is True
    assert state.key.name == "Key"
    assert state.fill.name == "Fill"


def test_state_from_args_circadian() -> None:
    state = cli.state_from_args(cli.parse_args(["-c"]), now=datetime(2024, 1, 1, 15, 4))
    assert state.toggle is False
    assert state.key.temperature == SignedDelta.absolute(4600)
    assert state.fill.temperature == SignedDelta.absolute(4100)


def test_main_success(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[RunState] = []

    async def fake_run(state: RunState, **kwargs: Any) -> dict:
        seen.append(state)
        return {}

    monkeypatch.setattr(cli, "async_run", fake_run)
    assert cli.main(["-bk", "+5"]) == 0
    assert seen[0].key.brightness == SignedDelta.relative(5)
    assert seen[0].toggle is False


def test_main_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    async def fake_run(state: RunState, **kwargs: Any) -> dict:
        raise DeviceError("Key Light: failed to fetch lights: boom")

    monkeypatch.setattr(cli, "async_run", fake_run)
    assert cli.main([]) == 1
    assert capsys.readouterr().err.strip() == "Key Light: failed to fetch lights: boom"
