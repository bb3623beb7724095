"""Folio configuration management."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from folio.models.enums import ReviewMode

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Folio configuration."""

    data_path: Path = field(default_factory=lambda: Path.home() / ".folio")
    database_name: str = "folio.db"
    log_level: str = "INFO"
    wal_mode: bool = True

    # Review subsystem
    review_mode: str = "single"
    review_subsystem: bool = True

    @classmethod
    def load(cls, data_path: Path | None = None) -> Config:
        """Load config from env vars, then YAML file, then defaults."""
        config = cls()

        if data_path:
            config.data_path = data_path

        # Override from env
        env_path = os.environ.get("FOLIO_HOME")
        if env_path:
            config.data_path = Path(env_path)

        env_log = os.environ.get("FOLIO_LOG_LEVEL")
        if env_log:
            config.log_level = env_log

        # Load YAML config if exists
        config_file = config.data_path / "config.yaml"
        if config_file.exists():
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
            for key, value in data.items():
                if hasattr(config, key):
                    expected_type = type(getattr(config, key))
                    if expected_type is Path:
                        setattr(config, key, Path(value))
                    else:
                        setattr(config, key, expected_type(value))

        # Review mode from env wins over the file; it is flipped per deployment.
        env_mode = os.environ.get("FOLIO_REVIEW_MODE")
        if env_mode:
            config.review_mode = env_mode

        return config

    @property
    def db_path(self) -> Path:
        return self.data_path / self.database_name

    @property
    def mode(self) -> ReviewMode:
        """Configured review mode, falling back to single-blind if unrecognised."""
        try:
            return ReviewMode.parse(self.review_mode)
        except ValueError:
            logger.warning("Unknown review_mode %r, using single-blind", self.review_mode)
            return ReviewMode.SINGLE

    def save(self) -> None:
        """Save current config to YAML."""
        self.data_path.mkdir(parents=True, exist_ok=True)
        config_file = self.data_path / "config.yaml"
        data = {
            "database_name": self.database_name,
            "log_level": self.log_level,
            "wal_mode": self.wal_mode,
            "review_mode": self.review_mode,
            "review_subsystem": self.review_subsystem,
        }
        with open(config_file, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
