"""Tests for the Config system."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from totem.config import Config, get_config, reset_config
from totem.models.backup import BackupSelection


@pytest.fixture(autouse=True)
def _clean_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(config_dir=tmp_path)


class TestConfig:
    def test_default_values(self, config: Config) -> None:
        assert config.minecraft_path == ""
        assert config.backup_dest == ""
        assert config.log_level == "INFO"
        assert config.default_selection == BackupSelection()

    def test_set_persists(self, config: Config, tmp_path: Path) -> None:
        config.minecraft_path = "/games/.minecraft"
        reloaded = Config(config_dir=tmp_path)
        assert reloaded.minecraft_path == "/games/.minecraft"

    def test_batch_update_single_write(self, config: Config, tmp_path: Path) -> None:
        with config.batch_update():
            config.set("backup_dest", "/backups")
            config.set("defaults.include_saves", True)
            assert not (tmp_path / "config.json").exists()
        data = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
        assert data["backup_dest"] == "/backups"
        assert data["defaults"]["include_saves"] is True

    def test_default_selection_from_file(self, tmp_path: Path) -> None:
        (tmp_path / "config.json").write_text(
            json.dumps({"defaults": {"zip_output": True, "include_xaero": True}}), encoding="utf-8"
        )
        selection = Config(config_dir=tmp_path).default_selection
        assert selection.zip_output
        assert selection.include_xaero
        assert not selection.include_saves

    def test_partial_user_file_keeps_other_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "config.json").write_text(json.dumps({"log_level": "debug"}), encoding="utf-8")
        config = Config(config_dir=tmp_path)
        assert config.log_level == "DEBUG"
        assert config.get("defaults.open_when_done") is False

    def test_corrupt_file_falls_back_to_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "config.json").write_text("{broken", encoding="utf-8")
        assert Config(config_dir=tmp_path).backup_dest == ""

    def test_get_missing_key(self, config: Config) -> None:
        assert config.get("no.such.key", "fallback") == "fallback"

    def test_log_dir(self, config: Config, tmp_path: Path) -> None:
        assert config.log_dir == tmp_path / "logs"


def test_get_config_is_singleton(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr("totem.config._DEFAULT_DATA_DIR", tmp_path)
    assert get_config() is get_config()
