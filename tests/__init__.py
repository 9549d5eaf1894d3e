"""Tests for proc-cpuinfo."""

from pathlib import Path


DATA_DIR = Path(__file__).parent / "data"


def load_fixture(name: str) -> str:
    """Return the content of a captured /proc/cpuinfo file from tests/data.

    Args:
        name: File name inside the data directory

    Returns:
        The file content as text
    """
    return (DATA_DIR / name).read_text(encoding="utf-8")
