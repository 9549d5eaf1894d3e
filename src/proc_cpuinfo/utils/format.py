SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_bytes(bytes_value: int | float) -> str:
    """
    Format a byte count into a human-readable size.

    Whole multiples of a binary unit are rendered without a fractional part,
    since cache sizes reported by the kernel almost always are.

    Args:
        bytes_value: Number of bytes to format

    Returns:
        Human-readable string representation (e.g., "18MB", "1.5KB")

    Examples:
        >>> format_bytes(512)
        '512B'
        >>> format_bytes(1536)
        '1.5KB'
        >>> format_bytes(18874368)
        '18MB'
    """
    value = float(bytes_value)
    for unit in SIZE_UNITS:
        if value < 1024.0:
            break

        value /= 1024.0
    else:
        unit = "PB"

    if value.is_integer():
        return f"{int(value)}{unit}"

    return f"{value:.1f}{unit}"
