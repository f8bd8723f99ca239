from __future__ import annotations

from pathlib import Path

import pytest

from castle_cli.walkthrough import load_script, main, run_walkthrough
from castle_logic.engine import GameEngine

WALKTHROUGHS = Path(__file__).resolve().parents[1] / "walkthroughs"


def test_victory_script_wins() -> None:
    result = run_walkthrough(load_script(str(WALKTHROUGHS / "victory.yaml")), GameEngine())
    assert result["won"]
    assert result["room"] == "vault"
    assert result["stats"]["secretsFound"] == 2


def test_dragon_script_befriends_dragon() -> None:
    engine = GameEngine()
    result = run_walkthrough(load_script(str(WALKTHROUGHS / "dragon.yaml")), engine)
    assert not result["won"]
    assert result["stats"]["dragonFriendly"]
    assert "dragon tooth" in engine.state.inventory


def test_load_script_rejects_non_list(tmp_path: Path) -> None:
    script = tmp_path / "bad.yaml"
    script.write_text("commands: look\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_script(str(script))


def test_main_writes_transcript(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main([str(WALKTHROUGHS / "victory.yaml"), "--log-dir", str(tmp_path)])
    assert code == 0
    logs = list(tmp_path.glob("victory_*.log"))
    assert len(logs) == 1
    assert "*** YOU WIN ***" in logs[0].read_text(encoding="utf-8")
    assert "Won: YES" in capsys.readouterr().out


def test_main_reports_missing_script(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "nope.yaml")]) == 1
    assert "not found" in capsys.readouterr().out


def test_main_reports_bad_world(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    world = tmp_path / "broken.yaml"
    world.write_text(
        "start_room: a\nrooms:\n  a: {name: A, description: a, exits: {north: b}}\nitems: {}\n",
        encoding="utf-8",
    )
    code = main([str(WALKTHROUGHS / "victory.yaml"), "--world", str(world), "--log-dir", str(tmp_path)])
    assert code == 1
    assert "unknown room 'b'" in capsys.readouterr().out


def test_main_reports_malformed_world(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    world = tmp_path / "nameless.yaml"
    world.write_text("start_room: a\nrooms:\n  a: {description: a}\n", encoding="utf-8")
    code = main([str(WALKTHROUGHS / "victory.yaml"), "--world", str(world), "--log-dir", str(tmp_path)])
    assert code == 1
    assert "missing 'name'" in capsys.readouterr().out
