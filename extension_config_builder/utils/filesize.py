"""
Human-readable file sizes for error messages.
"""

import math

UNITS = ["B", "kB", "MB", "GB", "TB"]


def to_filesize(num_bytes: int, precision: int = 2, space: bool = False) -> str:
    """
    Format a byte count with binary (1024) scaling.

    Args:
        num_bytes: Size in bytes
        precision: Maximum number of decimals, trailing zeros are dropped
        space: Put a space between the number and the unit

    Returns:
        Size string such as "64kB" or "1.5MB"
    """
    if num_bytes < 0:
        raise ValueError(f"File size cannot be negative: {num_bytes}")

    scale = 0
    if num_bytes >= 1024:
        scale = min(int(math.log(num_bytes, 1024)), len(UNITS) - 1)

    value = round(num_bytes / 1024 ** scale, precision)
    # Rounding can carry into the next unit
    if value >= 1024 and scale < len(UNITS) - 1:
        scale += 1
        value = round(num_bytes / 1024 ** scale, precision)

    number = f"{value:.{precision}f}".rstrip("0").rstrip(".") if precision > 0 else f"{value:.0f}"
    separator = " " if space else ""
    return f"{number}{separator}{UNITS[scale]}"
