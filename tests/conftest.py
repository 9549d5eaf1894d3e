"""Shared pytest fixtures for proc-cpuinfo tests.

The ``twelve_thread_text`` fixture is a capture of /proc/cpuinfo from a
12th Gen Intel Core i5-12400 (6 cores, 12 threads). Tests that need small,
targeted inputs build them inline with ``textwrap.dedent``.
"""

import pytest

from proc_cpuinfo.cpuinfo import ProcessorTable
from tests import load_fixture


@pytest.fixture
def twelve_thread_text():
    return load_fixture("cpuinfo_12_threads.txt")


@pytest.fixture
def table(twelve_thread_text):
    return ProcessorTable(twelve_thread_text)


@pytest.fixture
def cpuinfo_file(tmp_path, twelve_thread_text):
    path = tmp_path / "cpuinfo"
    path.write_text(twelve_thread_text, encoding="utf-8")
    return path
