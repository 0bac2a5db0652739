"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "https://roadways-ledger-backend.onrender.com"


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str) -> Optional[float]:
    """Return a positive float from the environment, or None when unset/invalid."""

    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "North East Roadways Ledger"
    EXPORT_FILENAME = "North_East_Roadways_Ledger.csv"
    DEFAULT_DATE_FORMAT = "%d/%m/%Y"

    def __init__(self) -> None:
        self.API_URL = os.getenv("ROADLEDGER_API_URL", DEFAULT_API_URL).rstrip("/")
        # None means the transport decides; requests itself never times out.
        self.REQUEST_TIMEOUT = _env_float("ROADLEDGER_REQUEST_TIMEOUT")
        self.DATE_FORMAT = os.getenv("ROADLEDGER_DATE_FORMAT", self.DEFAULT_DATE_FORMAT)
        self.DEV_MODE = _env_bool("ROADLEDGER_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()

    def _resolve_data_dir(self) -> Path:
        """Return the directory holding logs and CSV exports."""

        data_root = os.getenv("ROADLEDGER_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Protected install locations fall back to the user's home directory.
            fallback_path = Path.home() / ".roadledger"
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()

    @property
    def export_dir(self) -> Path:
        return Path(self.DATA_DIR) / "exports"

    def endpoint(self, path: str) -> str:
        """Join an API path onto the configured base URL."""

        clean = path if path.startswith("/") else f"/{path}"
        return f"{self.API_URL}{clean}"


class DevConfig(BaseConfig):
    """Development configuration pointing at the same backend with verbose logging."""

    DEBUG = True
    TESTING = False

    def __init__(self) -> None:
        super().__init__()
        self.DEV_MODE = True
