"""Parsers for /proc/cpuinfo text.

This module provides functions to split raw /proc/cpuinfo content into
per-processor blocks and key/value fields, and to convert individual field
values into typed data. Value parsers never raise: a value that does not
have the expected shape yields ``None``.
"""

import re
import typing as t

from proc_cpuinfo.utils.types import AddressPair


BLOCK_SEPARATOR = "\n\n"

KIB = 1024
MIB = 1024 * KIB
GIB = 1024 * MIB

SIZE_MULTIPLIERS = {
    "B": 1,
    "KB": KIB,
    "MB": MIB,
    "GB": GIB,
}

PHYSICAL_SUFFIX = " bits physical"
VIRTUAL_SUFFIX = " bits virtual"

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_HEX_RE = re.compile(r"\+?[0-9a-fA-F]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def split_blocks(text: str) -> t.Iterator[str]:
    """Split /proc/cpuinfo content into raw per-processor blocks.

    Blocks are separated by a single blank line. Empty segments, such as the
    one produced by a trailing newline, are skipped. Every call returns a new
    generator over the same text.

    Args:
        text: Raw content of /proc/cpuinfo.

    Yields:
        Raw text of each processor block, in document order.
    """
    for block in text.split(BLOCK_SEPARATOR):
        if block:
            yield block


def parse_block(raw: str) -> dict[str, str]:
    """Parse one processor block into key-value pairs.

    Each line is split on its first colon and both sides are stripped.
    Lines without a colon are ignored. A repeated key keeps its last value.

    Args:
        raw: Raw text of a single processor block.

    Returns:
        Dictionary of field name to field value.
    """
    fields = {}
    for line in raw.split("\n"):
        if ":" in line:
            key, value = line.split(":", 1)
            fields[key.strip()] = value.strip()

    return fields


def parse_unsigned(value: str, bits: int = 64) -> int | None:
    """Parse a decimal unsigned integer that fits in ``bits`` bits."""
    if not _UNSIGNED_RE.fullmatch(value):
        return None

    number = int(value)
    if number >= 1 << bits:
        return None

    return number


def parse_hex(value: str) -> int | None:
    """Parse a hexadecimal value such as ``0x2c``.

    Any leading ``0x`` prefixes are removed before parsing in base 16.
    """
    while value.startswith("0x"):
        value = value[2:]

    if not _HEX_RE.fullmatch(value):
        return None

    number = int(value, 16)
    if number >= 1 << 64:
        return None

    return number


def parse_float(value: str) -> float | None:
    """Parse a decimal floating point value such as ``2500.000``."""
    if not _FLOAT_RE.fullmatch(value):
        return None

    return float(value)


def parse_size(value: str) -> int | None:
    """Parse a size such as ``18432 KB`` into bytes.

    A bare number is taken to be bytes already. Units other than B, KB, MB
    and GB are rejected.

    Examples:
        >>> parse_size("18432 KB")
        18874368
        >>> parse_size("1048576")
        1048576
        >>> parse_size("5 XB") is None
        True
    """
    if " " not in value:
        return parse_unsigned(value)

    number, unit = value.split(" ", 1)
    multiplier = SIZE_MULTIPLIERS.get(unit)
    size = parse_unsigned(number)
    if multiplier is None or size is None:
        return None

    return size * multiplier


def parse_bool(value: str) -> bool:
    """Return True only for the literal ``yes``."""
    return value == "yes"


def parse_flag_set(value: str) -> frozenset[str]:
    """Split a space separated list of flags into a set.

    Empty tokens are dropped, so an empty value gives an empty set.
    """
    return frozenset(token for token in value.split(" ") if token)


def parse_address_sizes(value: str) -> AddressPair | None:
    """Parse ``39 bits physical, 48 bits virtual`` into ``(39, 48)``.

    Both halves must parse, otherwise the whole value is rejected.
    """
    if "," not in value:
        return None

    physical, virtual = value.split(",", 1)
    physical = physical.strip().removesuffix(PHYSICAL_SUFFIX)
    virtual = virtual.strip().removesuffix(VIRTUAL_SUFFIX)

    physical_bits = parse_unsigned(physical)
    virtual_bits = parse_unsigned(virtual)
    if physical_bits is None or virtual_bits is None:
        return None

    return physical_bits, virtual_bits
