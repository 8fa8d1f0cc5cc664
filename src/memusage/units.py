"""Human-readable memory sizes."""

from memusage.models import UnitSystem


def format_memory(size: int, unit_system: UnitSystem) -> str:
    """
    Format a byte count as a human-readable string.

    Byte-scale values are printed as whole bytes ("512 B"); anything larger is
    scaled to the biggest unit that keeps the value >= 1 and printed with two
    decimals ("1.95 MiB"). Rounding follows float formatting (half-even on the
    exact binary value).

    Args:
        size: Number of bytes. Must be a non-negative integer.
        unit_system: Decimal (base 1000) or binary (base 1024) units.

    Raises:
        TypeError: If size is not an integer.
        ValueError: If size is negative.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"memory size must be an integer, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"memory size cannot be negative: {size}")

    base = unit_system.base
    labels = unit_system.labels

    exponent = 0
    while exponent < len(labels) - 1 and size >= base ** (exponent + 1):
        exponent += 1

    if exponent == 0:
        return f"{size} {labels[0]}"
    return f"{size / base**exponent:.2f} {labels[exponent]}"
