import typing as t

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_serializer
from pydantic import model_validator

from proc_cpuinfo.utils import format_bytes


if t.TYPE_CHECKING:
    from proc_cpuinfo.cpuinfo import ProcessorBlock


class AddressSizes(BaseModel):
    """Physical and virtual address widths in bits."""

    physical: int
    virtual: int


class ProcessorInfo(BaseModel):
    """Typed snapshot of one logical processor.

    Attributes are ``None`` when the field is missing from /proc/cpuinfo or
    could not be parsed.
    """

    processor: int | None = None
    vendor_id: str | None = None
    cpu_family: int | None = Field(default=None, ge=0, le=255)
    model: int | None = None
    model_name: str | None = None
    stepping: int | None = None
    microcode: int | None = None
    cpu_mhz: float | None = None
    cache_size: int | None = None
    physical_id: int | None = None
    siblings: int | None = None
    core_id: int | None = None
    cpu_cores: int | None = None
    apicid: int | None = None
    initial_apicid: int | None = None
    fpu: bool | None = None
    fpu_exception: bool | None = None
    cpuid_level: int | None = None
    wp: bool | None = None
    flags: frozenset[str] = frozenset()
    vmx_flags: frozenset[str] = frozenset()
    bugs: frozenset[str] = frozenset()
    bogomips: float | None = None
    clflush_size: int | None = None
    cache_alignment: int | None = None
    address_sizes: AddressSizes | None = None
    power_management: str | None = None
    human_cache_size: str = ""

    @model_validator(mode="after")
    def human_values(self):
        self.human_cache_size = format_bytes(self.cache_size) if self.cache_size is not None else ""

        return self

    @field_serializer("flags", "vmx_flags", "bugs")
    def serialize_sorted(self, value: frozenset[str]) -> list[str]:
        return sorted(value)

    @classmethod
    def from_block(cls, block: "ProcessorBlock") -> "ProcessorInfo":
        address_sizes = block.address_sizes

        return cls(
            processor=block.processor,
            vendor_id=block.vendor_id,
            cpu_family=block.cpu_family,
            model=block.model,
            model_name=block.model_name,
            stepping=block.stepping,
            microcode=block.microcode,
            cpu_mhz=block.cpu_mhz,
            cache_size=block.cache_size,
            physical_id=block.physical_id,
            siblings=block.siblings,
            core_id=block.core_id,
            cpu_cores=block.cpu_cores,
            apicid=block.apicid,
            initial_apicid=block.initial_apicid,
            fpu=block.fpu,
            fpu_exception=block.fpu_exception,
            cpuid_level=block.cpuid_level,
            wp=block.wp,
            flags=block.flags,
            vmx_flags=block.vmx_flags,
            bugs=block.bugs,
            bogomips=block.bogomips,
            clflush_size=block.clflush_size,
            cache_alignment=block.cache_alignment,
            address_sizes=AddressSizes(physical=address_sizes[0], virtual=address_sizes[1]) if address_sizes else None,
            power_management=block.power_management,
        )
