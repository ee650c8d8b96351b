from __future__ import annotations

from pathlib import Path

from seabattle.game.infra import app_data
from seabattle.game.infra.app_data import (
    ensure_app_data_dirs,
    resolve_app_data_root,
    resolve_game_root,
    resolve_logs_dir,
)


def test_resolve_app_data_root_prefers_configured_dir(monkeypatch, tmp_path) -> None:
    custom = tmp_path / "custom_root"
    monkeypatch.setenv("SEABATTLE_APP_DATA_DIR", str(custom))
    assert resolve_app_data_root() == custom


def test_resolve_app_data_root_defaults_to_project_root_appdata(monkeypatch) -> None:
    monkeypatch.delenv("SEABATTLE_APP_DATA_DIR", raising=False)
    project_root = Path(app_data.__file__).resolve().parents[3]
    assert resolve_game_root() == project_root
    assert resolve_app_data_root() == project_root / "appdata"
    assert (project_root / "seabattle").is_dir()


def test_relative_app_data_dir_resolves_against_project_root(monkeypatch) -> None:
    monkeypatch.setenv("SEABATTLE_APP_DATA_DIR", "state")
    assert resolve_app_data_root() == resolve_game_root() / "state"


def test_resolve_logs_dir_normalizes_relative_env_path(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SEABATTLE_APP_DATA_DIR", str(tmp_path / "root"))
    monkeypatch.setenv("SEABATTLE_LOG_DIR", "custom_logs")
    assert resolve_logs_dir() == tmp_path / "root" / "custom_logs"
    monkeypatch.delenv("SEABATTLE_LOG_DIR")
    assert resolve_logs_dir() == tmp_path / "root" / "logs"


def test_ensure_app_data_dirs_creates_directories(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SEABATTLE_APP_DATA_DIR", str(tmp_path / "seabattle_data"))
    monkeypatch.delenv("SEABATTLE_LOG_DIR", raising=False)

    paths = ensure_app_data_dirs()

    assert paths["root"].exists()
    assert paths["logs"].exists()
    assert paths["logs"].name == "logs"
