"""Unit tests for proc_cpuinfo.config module"""

from pathlib import Path

from proc_cpuinfo.config import Config


class TestConfig:
    """Test cases for Config class"""

    def test_defaults(self, monkeypatch):
        """Test default values when no environment variables are set"""
        for name in ("CPUINFO_PATH", "LOG_DIR", "LOG_LEVEL", "LOG_RETENTION_DAYS"):
            monkeypatch.delenv(f"PROC_CPUINFO_{name}", raising=False)

        config = Config()

        assert config.cpuinfo_path == Path("/proc/cpuinfo")
        assert config.log_dir is None
        assert config.log_level == "INFO"
        assert config.log_retention_days == 10

    def test_custom_values(self):
        """Test that Config accepts custom values"""
        config = Config(
            cpuinfo_path=Path("/tmp/cpuinfo"),
            log_dir=Path("/var/log/custom"),
            log_level="DEBUG",
            log_retention_days=30,
        )

        assert config.cpuinfo_path == Path("/tmp/cpuinfo")
        assert config.log_dir == Path("/var/log/custom")
        assert config.log_level == "DEBUG"
        assert config.log_retention_days == 30

    def test_env_var_override_cpuinfo_path(self, monkeypatch):
        """Test that PROC_CPUINFO_CPUINFO_PATH environment variable works"""
        monkeypatch.setenv("PROC_CPUINFO_CPUINFO_PATH", "/srv/captures/cpuinfo")

        config = Config()

        assert config.cpuinfo_path == Path("/srv/captures/cpuinfo")

    def test_env_var_override_log_level(self, monkeypatch):
        """Test that PROC_CPUINFO_LOG_LEVEL environment variable overrides default"""
        monkeypatch.setenv("PROC_CPUINFO_LOG_LEVEL", "WARNING")

        config = Config()

        assert config.log_level == "WARNING"

    def test_env_var_override_log_dir(self, monkeypatch):
        """Test that PROC_CPUINFO_LOG_DIR environment variable works"""
        monkeypatch.setenv("PROC_CPUINFO_LOG_DIR", "/custom/log/dir")

        config = Config()

        assert config.log_dir == Path("/custom/log/dir")

    def test_env_ignore_empty(self, monkeypatch):
        """Test that empty environment variables are ignored"""
        monkeypatch.setenv("PROC_CPUINFO_LOG_LEVEL", "")

        config = Config()

        assert config.log_level == "INFO"

    def test_normalize_log_level_lowercase(self):
        """Test that log_level is converted to uppercase"""
        config = Config(log_level="debug")

        assert config.log_level == "DEBUG"
