"""
Configuration management for the gazette matcher.
Handles loading and validating configuration from environment variables and files.
"""

import os
from dataclasses import dataclass
from datetime import date
from typing import List, Optional
from pathlib import Path
from dotenv import load_dotenv

from ..errors import ConfigError
from ..processors.reconciler import MODES, validate_threshold
from ..processors.validator import DEFAULT_NAME_COLUMN

OUTPUT_FORMATS = ['text', 'json', 'csv']


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


@dataclass
class Config:
    """Configuration settings for the gazette matcher."""

    # Matching settings
    threshold: int = 100
    mode: str = 'filter'
    name_column: str = DEFAULT_NAME_COLUMN
    approval_date: Optional[str] = None
    date_format: str = '%d/%m/%Y'

    # Output settings
    output_format: str = 'text'  # text, json, csv

    # Performance settings
    batch_size: int = 500
    max_workers: int = 1
    timeout: Optional[float] = None

    # Logging settings
    log_level: str = 'INFO'

    # Service settings
    app_env: str = 'production'
    host: str = '127.0.0.1'
    port: int = 5000
    allowed_origins: str = '*'

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> 'Config':
        """Create configuration from environment variables.

        Args:
            env_file: Optional path to .env file

        Returns:
            Config: Configuration instance

        Raises:
            ConfigError: If a numeric environment variable cannot be parsed
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        return cls(
            threshold=_env_int('MATCH_THRESHOLD', 100),
            mode=os.getenv('MATCH_MODE', 'filter'),
            name_column=os.getenv('NAME_COLUMN', DEFAULT_NAME_COLUMN),
            approval_date=os.getenv('APPROVAL_DATE') or None,
            date_format=os.getenv('DATE_FORMAT', '%d/%m/%Y'),
            output_format=os.getenv('OUTPUT_FORMAT', 'text'),
            batch_size=_env_int('BATCH_SIZE', 500),
            max_workers=_env_int('MAX_WORKERS', 1),
            timeout=_env_float('MATCH_TIMEOUT'),
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
            app_env=os.getenv('APP_ENV', 'production'),
            host=os.getenv('HOST', '127.0.0.1'),
            port=_env_int('PORT', 5000),
            allowed_origins=os.getenv('ALLOWED_ORIGINS', '*')
        )

    def validate(self) -> bool:
        """Validate configuration settings.

        Returns:
            bool: True if configuration is valid

        Raises:
            ConfigError: If any setting is out of range
        """
        self.threshold = validate_threshold(self.threshold)

        if self.mode not in MODES:
            raise ConfigError(f"mode must be one of: {', '.join(MODES)}")
        if not self.name_column:
            raise ConfigError("name_column must not be empty")

        # Validate numeric values are positive
        if self.batch_size <= 0:
            raise ConfigError("batch_size must be positive")
        if self.max_workers <= 0:
            raise ConfigError("max_workers must be positive")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigError("timeout must be positive")

        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(f"output_format must be one of: {', '.join(OUTPUT_FORMATS)}")

        return True

    @property
    def debug_details(self) -> bool:
        """Whether error details may be returned to API callers."""
        return self.app_env == 'development'

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.allowed_origins.split(',') if o.strip()]

    def resolve_approval_date(self) -> str:
        """Approval date to stamp on approved records, defaulting to today."""
        if self.approval_date:
            return self.approval_date
        return date.today().strftime(self.date_format)
