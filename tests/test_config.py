"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from tiny_error.config import CONFIG_ENV_VAR, PROJECT_ROOT, Config, LogConfig, ReportConfig
from tiny_error.config import config as config_module


class TestDefaults:
    """Tests for the built-in defaults."""

    def test_defaults(self):
        """Test that an empty Config carries usable defaults."""
        configuration = Config()

        assert configuration.logging.log_level == "WARNING"
        assert configuration.logging.file_log_level == "DEBUG"
        assert configuration.logging.resolved_log_dir is None
        assert configuration.report.prefix == "Error: "
        assert configuration.report.exit_code == 1


class TestValidation:
    """Tests for field validation."""

    def test_log_level_is_upper_cased(self):
        """Test that levels are accepted case-insensitively."""
        assert LogConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        """Test that an unknown level fails validation."""
        with pytest.raises(ValidationError, match="Unrecognized log level"):
            LogConfig(file_log_level="VERBOSE")

    @pytest.mark.parametrize("exit_code", [0, 256, -1])
    def test_exit_code_range(self, exit_code):
        """Test that the failure status must be a non-zero process status."""
        with pytest.raises(ValidationError):
            ReportConfig(exit_code=exit_code)

    def test_relative_log_dir_resolves_under_project_root(self):
        """Test that a relative log dir is anchored at the project root."""
        log_config = LogConfig(file_log_dir="logs")

        assert log_config.resolved_log_dir == (PROJECT_ROOT / "logs").resolve()

    def test_absolute_log_dir_kept(self, tmp_path):
        """Test that an absolute log dir is used as-is."""
        assert LogConfig(file_log_dir=str(tmp_path)).resolved_log_dir == tmp_path


class TestLoadFromFile:
    """Tests for Config.load_from_file."""

    def test_loads_yaml(self, tmp_path):
        """Test that values come from the YAML file."""
        path = tmp_path / "config.yml"
        path.write_text(
            "logging:\n  log_level: info\nreport:\n  prefix: 'fatal: '\n  exit_code: 2\n",
            encoding="utf-8",
        )

        configuration = Config.load_from_file(path)

        assert configuration.logging.log_level == "INFO"
        assert configuration.report.prefix == "fatal: "
        assert configuration.report.exit_code == 2

    def test_empty_file_gives_defaults(self, tmp_path):
        """Test that an empty file is the same as no settings."""
        path = tmp_path / "config.yml"
        path.write_text("", encoding="utf-8")

        assert Config.load_from_file(path) == Config()

    def test_missing_file_raises(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            Config.load_from_file(tmp_path / "absent.yml")

    def test_invalid_content_raises(self, tmp_path):
        """Test that invalid values raise ValidationError."""
        path = tmp_path / "config.yml"
        path.write_text("report:\n  exit_code: 0\n", encoding="utf-8")

        with pytest.raises(ValidationError):
            Config.load_from_file(path)


class TestLoad:
    """Tests for Config.load path selection."""

    def test_explicit_path_wins(self, tmp_path, monkeypatch):
        """Test that an explicit path is preferred over the environment."""
        explicit = tmp_path / "explicit.yml"
        explicit.write_text("report:\n  exit_code: 3\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "ignored.yml"))

        assert Config.load(explicit).report.exit_code == 3

    def test_environment_variable(self, config_file):
        """Test that TINY_ERROR_CONFIG names the file."""
        assert Config.load().logging.log_level == "CRITICAL"

    def test_missing_named_file_raises(self, tmp_path, monkeypatch):
        """Test that a file named by the environment must exist."""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.yml"))

        with pytest.raises(FileNotFoundError):
            Config.load()

    def test_missing_default_file_gives_defaults(self, tmp_path, monkeypatch):
        """Test that an absent default config.yml falls back to defaults."""
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.setattr(config_module, "CONFIG_DIR", tmp_path)

        assert Config.load() == Config()

    def test_default_file_is_read(self, tmp_path, monkeypatch):
        """Test that config/config.yml is used when nothing else is named."""
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.setattr(config_module, "CONFIG_DIR", tmp_path)
        (tmp_path / "config.yml").write_text("report:\n  prefix: 'oops: '\n", encoding="utf-8")

        assert Config.load().report.prefix == "oops: "
