"""Tests for the processor snapshot models."""

import json

import pytest

from pydantic import ValidationError

from proc_cpuinfo.cpuinfo import ProcessorBlock
from proc_cpuinfo.models import AddressSizes
from proc_cpuinfo.models import ProcessorInfo


class TestProcessorInfo:
    def test_from_block(self, table):
        info = table.block_at(4).to_model()

        assert info.processor == 4
        assert info.model_name == "12th Gen Intel(R) Core(TM) i5-12400"
        assert info.microcode == 44
        assert info.cpu_mhz == 800.116
        assert info.cache_size == 18874368
        assert info.human_cache_size == "18MB"
        assert info.core_id == 2
        assert info.address_sizes == AddressSizes(physical=39, virtual=48)
        assert info.power_management == ""
        assert "avx2" in info.flags

    def test_from_empty_block(self):
        info = ProcessorBlock("").to_model()

        assert info.processor is None
        assert info.cache_size is None
        assert info.human_cache_size == ""
        assert info.address_sizes is None
        assert info.flags == frozenset()

    def test_serializes_sets_sorted(self):
        info = ProcessorBlock("processor\t: 0\nbugs\t\t: swapgs spectre_v2 spectre_v1").to_model()

        data = json.loads(info.model_dump_json())

        assert data["bugs"] == ["spectre_v1", "spectre_v2", "swapgs"]
        assert data["flags"] == []
        assert data["processor"] == 0

    def test_cpu_family_range(self):
        with pytest.raises(ValidationError):
            ProcessorInfo(cpu_family=256)
