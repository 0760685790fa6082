from __future__ import annotations

# Decimal ladder: each unit is 1000x the previous one.
UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB")


def format_byte_size(byte_size: int) -> str:
    """Render a byte count as e.g. ``"1.23MB"`` (base 1000, two decimals, no space)."""
    if byte_size < 0:
        raise ValueError(f"byte size must be non-negative, got {byte_size}")

    size = float(byte_size)
    unit_index = 0
    while size >= 1000 and unit_index < len(UNITS) - 1:
        size /= 1000
        unit_index += 1

    return f"{size:.2f}{UNITS[unit_index]}"
