from __future__ import annotations

from seabattle.infra.app_data import ensure_app_data_dirs, resolve_app_data_root, resolve_logs_dir


def test_resolve_app_data_root_prefers_configured_dir(monkeypatch, tmp_path) -> None:
    custom = tmp_path / "custom_root"
    monkeypatch.setenv("SEABATTLE_APP_DATA_DIR", str(custom))
    assert resolve_app_data_root() == custom


def test_resolve_app_data_root_defaults_to_appdata(monkeypatch) -> None:
    monkeypatch.delenv("SEABATTLE_APP_DATA_DIR", raising=False)
    assert resolve_app_data_root().name == "appdata"


def test_logs_dir_relative_override_is_anchored_at_app_data(monkeypatch, tmp_path) -> None:
    root = tmp_path / "appdata_root"
    monkeypatch.setenv("SEABATTLE_APP_DATA_DIR", str(root))
    monkeypatch.setenv("SEABATTLE_LOG_DIR", "runs")
    assert resolve_logs_dir() == root / "runs"


def test_ensure_app_data_dirs_creates_directories(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SEABATTLE_APP_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("SEABATTLE_LOG_DIR", raising=False)

    paths = ensure_app_data_dirs()

    assert paths["root"].exists()
    assert paths["logs"].exists()
    assert paths["logs"].name == "logs"
