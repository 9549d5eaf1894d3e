"""Settings for proc-cpuinfo"""

from pathlib import Path

from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from proc_cpuinfo.utils.types import UpperCase


DEFAULT_CPUINFO_PATH = Path("/proc/cpuinfo")


class Config(BaseSettings):
    # The trailing `_` keeps the variables readable as `PROC_CPUINFO_LOG_DIR`
    # rather than `PROC_CPUINFOLOG_DIR`
    model_config = SettingsConfigDict(env_prefix="PROC_CPUINFO_", env_ignore_empty=True)

    # File read by ProcessorTable.read() when no path is given
    cpuinfo_path: Path = DEFAULT_CPUINFO_PATH

    # Logging configuration
    log_dir: Path | None = None
    log_level: UpperCase = "INFO"
    log_retention_days: int = 10


CONFIG = Config()
