import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from tiny_error.config.constants import CONFIG_DIR, CONFIG_ENV_VAR, PROJECT_ROOT

# =============================================================================
#   Logger
# =============================================================================
logger = logging.getLogger(Path(__file__).stem)


# =============================================================================
#   LogConfig
# =============================================================================
class LogConfig(BaseModel):
    """Logging configuration."""

    log_level: str = "WARNING"
    file_log_level: str = "DEBUG"
    file_log_dir: Optional[str] = None
    file_log_max_files: int = Field(default=5, ge=0)
    file_log_file_size_mb: int = Field(default=1, ge=1)

    @field_validator("log_level", "file_log_level")
    def check_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Unrecognized log level: {v}")
        return v.upper()

    @property
    def resolved_log_dir(self) -> Optional[Path]:
        """Return absolute path to the log directory, or None when file logging is off."""
        if self.file_log_dir is None:
            return None
        p = Path(self.file_log_dir)
        if not p.is_absolute():
            p = (PROJECT_ROOT / p).resolve()
        return p


# =============================================================================
#   ReportConfig
# =============================================================================
class ReportConfig(BaseModel):
    """How the top-level reporter prints an error message."""

    prefix: str = "Error: "
    exit_code: int = Field(default=1, ge=1, le=255)


# =============================================================================
#   Config  (root)
# =============================================================================
class Config(BaseModel):
    """Root configuration loaded from config.yml."""

    logging: LogConfig = Field(default_factory=LogConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> "Config":
        """Load and validate configuration from a YAML file.

        Args:
            file_path: Path to config.yml.

        Returns:
            Validated Config instance.
        """
        file_path = Path(file_path)

        if not file_path.exists() or not file_path.is_file():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)

        return cls(**(raw or {}))

    @classmethod
    def load(cls, file_path: Optional[Union[str, Path]] = None) -> "Config":
        """Load configuration from the first place that names one.

        Order: ``file_path``, then the ``TINY_ERROR_CONFIG`` environment
        variable, then ``config/config.yml`` under the project root. Only the
        last one may be absent, in which case defaults are returned.
        """
        explicit = file_path or os.environ.get(CONFIG_ENV_VAR)
        if explicit:
            logger.debug("Loading configuration from %s", explicit)
            return cls.load_from_file(explicit)

        default_path = CONFIG_DIR / "config.yml"
        if not default_path.is_file():
            logger.debug("No configuration at %s, using defaults.", default_path)
            return cls()

        logger.debug("Loading configuration from %s", default_path)
        return cls.load_from_file(default_path)
