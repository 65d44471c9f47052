from pathlib import Path

# =============================================================================
#   Project-level path constants
# =============================================================================
# __file__ is src/tiny_error/config/constants.py
# parents[3] → project root (tiny-error/)
PROJECT_ROOT: Path = Path(__file__).parents[3]
CONFIG_DIR:   Path = PROJECT_ROOT / "config"

# Environment variable naming an alternative config.yml
CONFIG_ENV_VAR: str = "TINY_ERROR_CONFIG"
