"""Output formatters for processor information.

This module provides functions to format parsed processor data into
human-readable strings for diagnostic output.
"""

from proc_cpuinfo.cpuinfo import ProcessorTable
from proc_cpuinfo.models import ProcessorInfo


def format_processor(info: ProcessorInfo) -> str:
    """Format a single processor into a readable string.

    Fields that are missing or could not be parsed are omitted.

    Args:
        info: ProcessorInfo snapshot.

    Returns:
        Formatted string representation.
    """
    processor = info.processor if info.processor is not None else "?"
    lines = [f"=== Processor {processor} ==="]

    if info.model_name is not None:
        lines.append(f"Model: {info.model_name}")
    if info.vendor_id is not None:
        lines.append(f"Vendor: {info.vendor_id}")
    identification = [
        (label, value)
        for label, value in (("Family", info.cpu_family), ("Model", info.model), ("Stepping", info.stepping))
        if value is not None
    ]
    if identification:
        labels = "/".join(label for label, _ in identification)
        values = "/".join(str(value) for _, value in identification)
        lines.append(f"{labels}: {values}")
    if info.microcode is not None:
        lines.append(f"Microcode: {info.microcode:#x}")
    if info.cpu_mhz is not None:
        lines.append(f"Frequency: {info.cpu_mhz:.3f} MHz")
    if info.cache_size is not None:
        lines.append(f"Cache: {info.human_cache_size}")

    # Topology
    if info.physical_id is not None:
        lines.append(f"Physical ID: {info.physical_id}")
    if info.core_id is not None:
        of_cores = f" of {info.cpu_cores}" if info.cpu_cores is not None else ""
        lines.append(f"Core ID: {info.core_id}{of_cores}")
    if info.siblings is not None:
        lines.append(f"Siblings: {info.siblings}")

    if info.address_sizes is not None:
        lines.append(
            f"Address sizes: {info.address_sizes.physical} bits physical, {info.address_sizes.virtual} bits virtual"
        )
    if info.flags:
        lines.append(f"Flags: {len(info.flags)}")
    if info.bugs:
        lines.append(f"Bugs: {' '.join(sorted(info.bugs))}")

    return "\n".join(lines)


def format_processor_table(table: ProcessorTable) -> str:
    """Format every processor of a table into a readable string.

    Args:
        table: ProcessorTable to format.

    Returns:
        Formatted string representation.
    """
    lines = ["=== CPU Information (/proc/cpuinfo) ===\n"]

    count = 0
    for block in table:
        lines.append(format_processor(block.to_model()))
        lines.append("")
        count += 1

    lines.append(f"Total processors: {count}")

    return "\n".join(lines)
