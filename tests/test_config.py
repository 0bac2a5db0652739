"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

from roadledger.config import DEFAULT_API_URL, BaseConfig, DevConfig


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.delenv("ROADLEDGER_API_URL")

    config = BaseConfig()

    assert config.API_URL == DEFAULT_API_URL
    assert config.REQUEST_TIMEOUT is None
    assert config.DATE_FORMAT == "%d/%m/%Y"
    assert config.DEV_MODE is True
    assert config.DATA_DIR == (tmp_path / "instance").resolve()
    assert config.DATA_DIR.is_dir()


def test_api_url_trailing_slash_is_dropped(monkeypatch):
    monkeypatch.setenv("ROADLEDGER_API_URL", "http://localhost:5000/")

    config = BaseConfig()

    assert config.API_URL == "http://localhost:5000"
    assert config.endpoint("/api/bilty") == "http://localhost:5000/api/bilty"
    assert config.endpoint("api/login") == "http://localhost:5000/api/login"


def test_timeout_parsing(monkeypatch):
    monkeypatch.setenv("ROADLEDGER_REQUEST_TIMEOUT", "12.5")
    assert BaseConfig().REQUEST_TIMEOUT == 12.5

    monkeypatch.setenv("ROADLEDGER_REQUEST_TIMEOUT", "soon")
    assert BaseConfig().REQUEST_TIMEOUT is None

    monkeypatch.setenv("ROADLEDGER_REQUEST_TIMEOUT", "0")
    assert BaseConfig().REQUEST_TIMEOUT is None


def test_dev_mode_flag(monkeypatch):
    monkeypatch.setenv("ROADLEDGER_DEV_MODE", "off")
    assert BaseConfig().DEV_MODE is False
    assert DevConfig().DEV_MODE is True


def test_export_dir_under_data_dir(config):
    assert config.export_dir == Path(config.DATA_DIR) / "exports"
    assert config.EXPORT_FILENAME == "North_East_Roadways_Ledger.csv"


def test_date_format_override(monkeypatch):
    monkeypatch.setenv("ROADLEDGER_DATE_FORMAT", "%x")

    assert BaseConfig().DATE_FORMAT == "%x"
