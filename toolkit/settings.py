"""
Application Settings
====================
Loads toolkit configuration from YAML with environment overrides.

Resolution order (later wins):
1. Built-in defaults
2. config/settings.yaml (or the file named by TOOLKIT_CONFIG)
3. Environment variables (a .env file is honoured via python-dotenv)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from dotenv import load_dotenv

from .constants import JOURNAL_DEFAULT_LOT_SIZE, JOURNAL_STORAGE_KEY
from .utils import CONFIG_DIR, resolve_path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = CONFIG_DIR / "settings.yaml"
DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@dataclass
class AppSettings:
    """Runtime settings for the toolkit and its dashboard."""
    app_title: str = "Options Trade Toolkit"
    currency_symbol: str = "₹"

    # Paper trade journal
    storage_key: str = JOURNAL_STORAGE_KEY
    db_path: Path = Path("data/paper_trades/journal.db")
    default_lot_size: int = JOURNAL_DEFAULT_LOT_SIZE

    # Logging
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        app = data.get("app") or {}
        journal = data.get("journal") or {}
        logging_cfg = data.get("logging") or {}
        defaults = cls()
        return cls(
            app_title=app.get("title", defaults.app_title),
            currency_symbol=app.get("currency_symbol", defaults.currency_symbol),
            storage_key=journal.get("storage_key", defaults.storage_key),
            db_path=Path(journal.get("db_path", defaults.db_path)),
            default_lot_size=int(journal.get("default_lot_size", defaults.default_lot_size)),
            log_level=str(logging_cfg.get("level", defaults.log_level)).upper(),
            log_format=logging_cfg.get("format", defaults.log_format),
        )

    @property
    def resolved_db_path(self) -> Path:
        """Database path resolved against the project root."""
        return resolve_path(self.db_path)


def _load_yaml(config_path: Path) -> dict:
    """Load a YAML mapping, returning an empty dict when the file is absent."""
    if not config_path.exists():
        logger.debug(f"No settings file at {config_path}, using defaults")
        return {}

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {config_path} must contain a mapping")
    return data


def load_settings(config_path: str | Path | None = None) -> AppSettings:
    """
    Load settings from YAML and environment.

    Args:
        config_path: Optional settings file; defaults to TOOLKIT_CONFIG or
            config/settings.yaml

    Returns:
        AppSettings instance
    """
    load_dotenv()

    if config_path is None:
        config_path = os.getenv("TOOLKIT_CONFIG") or DEFAULT_CONFIG_PATH
    settings = AppSettings.from_dict(_load_yaml(resolve_path(config_path)))

    if os.getenv("TOOLKIT_DB_PATH"):
        settings.db_path = Path(os.environ["TOOLKIT_DB_PATH"])
    if os.getenv("TOOLKIT_STORAGE_KEY"):
        settings.storage_key = os.environ["TOOLKIT_STORAGE_KEY"]
    if os.getenv("TOOLKIT_LOG_LEVEL"):
        settings.log_level = os.environ["TOOLKIT_LOG_LEVEL"].upper()

    return settings


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure root logging once per process."""
    settings = settings or AppSettings()
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=settings.log_format)
    logging.getLogger("toolkit").setLevel(level)
