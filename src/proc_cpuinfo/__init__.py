"""proc-cpuinfo - Typed, lenient access to Linux /proc/cpuinfo data."""
import importlib.metadata

from proc_cpuinfo.cpuinfo import ProcessorBlock
from proc_cpuinfo.cpuinfo import ProcessorTable


__version__ = importlib.metadata.version(__spec__.parent)

__all__ = ["ProcessorBlock", "ProcessorTable", "__version__"]
