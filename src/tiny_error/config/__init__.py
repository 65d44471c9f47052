from tiny_error.config.config import Config, LogConfig, ReportConfig
from tiny_error.config.constants import CONFIG_DIR, CONFIG_ENV_VAR, PROJECT_ROOT

__all__ = [
    "Config",
    "LogConfig",
    "ReportConfig",
    "PROJECT_ROOT",
    "CONFIG_DIR",
    "CONFIG_ENV_VAR",
]
