from proc_cpuinfo.utils.format import format_bytes


__all__ = ["format_bytes"]
