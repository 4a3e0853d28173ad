"""Configuration management for PutPut CLI."""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from common.logging_config import get_logger
from putput.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

logger = get_logger(__name__)


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "base_url": DEFAULT_BASE_URL,
        "timeout": DEFAULT_TIMEOUT,
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.putput/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _defaults(self) -> dict:
        """Built-in defaults with PUTPUT_BASE_URL and PUTPUT_TIMEOUT applied."""
        config = self.DEFAULT_CONFIG.copy()
        base_url = os.environ.get('PUTPUT_BASE_URL')
        if base_url:
            config['base_url'] = base_url
        timeout = os.environ.get('PUTPUT_TIMEOUT')
        if timeout:
            try:
                config['timeout'] = float(timeout)
            except ValueError:
                logger.warning(f"Ignoring non-numeric PUTPUT_TIMEOUT={timeout!r}")
        return config

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            self.config_path = Path(tempfile.gettempdir()) / '.putput' / 'config.json'
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                config = self._defaults()
                config.update(data)
                return config
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Config file unreadable, using defaults: {e}")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except IOError:
                    logger.warning(f"Could not back up config to {backup_path}")
                return self._defaults()

        config = self._defaults()
        self._write(config)
        return config

    def _write(self, data: dict) -> None:
        try:
            with open(self.config_path, 'w') as f:
                json.dump(data, f, indent=2)
        except IOError as e:
            logger.warning(f"Could not write config to {self.config_path}: {e}")

    def save(self) -> None:
        """Save current configuration to file."""
        self._write(self.data)

    def get_token(self) -> Optional[str]:
        """
        Get the bearer token, preferring PUTPUT_TOKEN from the environment.

        Returns:
            Token string or None if not set
        """
        return os.environ.get('PUTPUT_TOKEN') or self.data.get('token')

    def set_token(self, token: str) -> None:
        """
        Set bearer token and save to file.

        Args:
            token: API token (format: "pp_..." or "pp_guest_...")
        """
        self.data['token'] = token
        self.save()

    def clear_token(self) -> None:
        self.data.pop('token', None)
        self.save()

    def get_base_url(self) -> str:
        return self.data.get('base_url', DEFAULT_BASE_URL)

    def get_timeout(self) -> float:
        """
        Get request timeout in seconds.

        Returns:
            Timeout value in seconds
        """
        return float(self.data.get('timeout', DEFAULT_TIMEOUT))
