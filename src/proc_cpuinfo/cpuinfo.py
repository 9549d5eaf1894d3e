"""Structured access to /proc/cpuinfo.

A :class:`ProcessorTable` wraps the raw text of /proc/cpuinfo and produces
one :class:`ProcessorBlock` per logical processor. Blocks expose the raw
fields as a read-only mapping plus typed properties for the well-known
fields. Typed properties return ``None`` when a field is missing or does not
parse, since the set of fields and their formats differ between
architectures and kernel versions.
"""

import logging
import typing as t

from collections.abc import Mapping
from pathlib import Path

from proc_cpuinfo.config import CONFIG
from proc_cpuinfo.models import ProcessorInfo
from proc_cpuinfo.parsers import parse_address_sizes
from proc_cpuinfo.parsers import parse_block
from proc_cpuinfo.parsers import parse_bool
from proc_cpuinfo.parsers import parse_flag_set
from proc_cpuinfo.parsers import parse_float
from proc_cpuinfo.parsers import parse_hex
from proc_cpuinfo.parsers import parse_size
from proc_cpuinfo.parsers import parse_unsigned
from proc_cpuinfo.parsers import split_blocks
from proc_cpuinfo.utils.types import AddressPair


logger = logging.getLogger("proc-cpuinfo")


class ProcessorTable:
    """The full content of /proc/cpuinfo."""

    __slots__ = ("_text",)

    def __init__(self, text: str):
        self._text = text

    @classmethod
    def from_string(cls, text: str) -> "ProcessorTable":
        return cls(text)

    @classmethod
    def read(cls, path: str | Path | None = None) -> "ProcessorTable":
        """Read processor information from a file.

        Args:
            path: File to read. Defaults to the configured cpuinfo path
                (``/proc/cpuinfo`` unless overridden).

        Returns:
            ProcessorTable holding the file content.

        Raises:
            OSError: The file could not be read (e.g. FileNotFoundError,
                PermissionError).
            UnicodeDecodeError: The file is not valid UTF-8.
        """
        path = Path(path) if path is not None else CONFIG.cpuinfo_path
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Unable to read {path}: {e}", extra={"path": str(path)})
            raise

        logger.debug("Read processor information", extra={"path": str(path), "size": len(text)})
        return cls(text)

    @property
    def text(self) -> str:
        return self._text

    def blocks(self) -> t.Iterator["ProcessorBlock"]:
        """Iterate over processor blocks in document order."""
        for raw in split_blocks(self._text):
            yield ProcessorBlock(raw)

    def __iter__(self) -> t.Iterator["ProcessorBlock"]:
        return self.blocks()

    def block_at(self, index: int) -> "ProcessorBlock | None":
        """Return the block whose ``processor`` field equals ``index``.

        Blocks are matched on the value of their ``processor`` field, not on
        their position in the file.
        """
        for block in self.blocks():
            if block.processor == index:
                return block

        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProcessorTable):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self._text)} characters>)"


class ProcessorBlock(Mapping[str, str]):
    """Fields of a single logical processor.

    Behaves as a read-only mapping of field name to the stripped raw value.
    """

    __slots__ = ("_fields",)

    def __init__(self, raw: str):
        self._fields = parse_block(raw)

    def __getitem__(self, key: str) -> str:
        return self._fields[key]

    def __iter__(self) -> t.Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(processor={self.get('processor')!r}, fields={len(self._fields)})"

    def _unsigned(self, key: str, bits: int = 64) -> int | None:
        value = self.get(key)
        return parse_unsigned(value, bits) if value is not None else None

    def _float(self, key: str) -> float | None:
        value = self.get(key)
        return parse_float(value) if value is not None else None

    def _bool(self, key: str) -> bool | None:
        value = self.get(key)
        return parse_bool(value) if value is not None else None

    def _flags(self, key: str) -> frozenset[str]:
        return parse_flag_set(self.get(key, ""))

    ### Identification ###
    @property
    def processor(self) -> int | None:
        return self._unsigned("processor")

    @property
    def vendor_id(self) -> str | None:
        return self.get("vendor_id")

    @property
    def cpu_family(self) -> int | None:
        return self._unsigned("cpu family", bits=8)

    @property
    def model(self) -> int | None:
        return self._unsigned("model")

    @property
    def model_name(self) -> str | None:
        return self.get("model name")

    @property
    def stepping(self) -> int | None:
        return self._unsigned("stepping")

    @property
    def microcode(self) -> int | None:
        """Microcode revision, reported by the kernel in hexadecimal."""
        value = self.get("microcode")
        return parse_hex(value) if value is not None else None

    ### Frequency and cache ###
    @property
    def cpu_mhz(self) -> float | None:
        return self._float("cpu MHz")

    @property
    def cache_size(self) -> int | None:
        """Cache size in bytes."""
        value = self.get("cache size")
        return parse_size(value) if value is not None else None

    @property
    def bogomips(self) -> float | None:
        return self._float("bogomips")

    @property
    def clflush_size(self) -> int | None:
        return self._unsigned("clflush size")

    @property
    def cache_alignment(self) -> int | None:
        return self._unsigned("cache_alignment")

    ### Topology ###
    @property
    def physical_id(self) -> int | None:
        return self._unsigned("physical id")

    @property
    def siblings(self) -> int | None:
        return self._unsigned("siblings")

    @property
    def core_id(self) -> int | None:
        return self._unsigned("core id")

    @property
    def cpu_cores(self) -> int | None:
        return self._unsigned("cpu cores")

    @property
    def apicid(self) -> int | None:
        return self._unsigned("apicid")

    @property
    def initial_apicid(self) -> int | None:
        return self._unsigned("initial apicid")

    @property
    def cpuid_level(self) -> int | None:
        return self._unsigned("cpuid level")

    ### Capabilities ###
    @property
    def fpu(self) -> bool | None:
        return self._bool("fpu")

    @property
    def fpu_exception(self) -> bool | None:
        return self._bool("fpu_exception")

    @property
    def wp(self) -> bool | None:
        return self._bool("wp")

    @property
    def flags(self) -> frozenset[str]:
        return self._flags("flags")

    @property
    def vmx_flags(self) -> frozenset[str]:
        return self._flags("vmx flags")

    @property
    def bugs(self) -> frozenset[str]:
        return self._flags("bugs")

    @property
    def address_sizes(self) -> AddressPair | None:
        """Physical and virtual address widths in bits."""
        value = self.get("address sizes")
        return parse_address_sizes(value) if value is not None else None

    @property
    def power_management(self) -> str | None:
        # Usually present with an empty value on x86
        return self.get("power management")

    def to_model(self) -> ProcessorInfo:
        """Snapshot the typed fields into a serializable model."""
        return ProcessorInfo.from_block(self)
