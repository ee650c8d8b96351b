from __future__ import annotations

import io

import pytest

from seabattle import main as main_module
from seabattle.game.infra.config import AppConfig


@pytest.fixture
def isolated_app_data(monkeypatch, tmp_path):
    monkeypatch.setenv("SEABATTLE_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("SEABATTLE_LOG_DIR", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    return tmp_path / "appdata"


def test_resolve_config_applies_cli_overrides() -> None:
    args = main_module.build_parser().parse_args(
        ["--no-show-ai", "--seed", "5", "--difficulty", "easy", "--log-level", "debug"]
    )
    config = main_module.resolve_config(args, AppConfig())
    assert config == AppConfig(show_ai_board=False, seed=5, ai_difficulty="easy", log_level="DEBUG")


def test_resolve_config_keeps_environment_values_without_flags() -> None:
    args = main_module.build_parser().parse_args([])
    base = AppConfig(show_ai_board=False, seed=3)
    assert main_module.resolve_config(args, base) == base


def test_main_simulate_prints_summary(isolated_app_data, capsys) -> None:
    assert main_module.main(["--simulate", "3", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("games=3 ")
    assert (isolated_app_data / "logs").exists()


def test_main_returns_error_status_when_input_closes(isolated_app_data, monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main_module.main([]) == 1
    assert "input closed" in capsys.readouterr().out


def test_main_plays_ai_match_from_stdin(isolated_app_data, monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("ai\nai\n"))
    assert main_module.main(["--seed", "8", "--no-show-ai"]) == 0
    assert " Won!" in capsys.readouterr().out
