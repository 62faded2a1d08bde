"""Decimal arithmetic helpers"""

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import List, Union

Numeric = Union[int, float, str, Decimal]

CENTS_PER_UNIT = 100
PERCENTAGE_TOLERANCE = Decimal("0.01")
HUNDRED_PERCENT = Decimal("100")


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert a numeric value to Decimal without binary float artifacts.

    Raises:
        ValueError: If value is not a finite number
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        except (InvalidOperation, TypeError) as exc:
            raise ValueError(f"Invalid numeric value: {value!r}") from exc

    if not result.is_finite():
        raise ValueError(f"Numeric value must be finite, got {value!r}")
    return result


def round_decimal(value: Numeric, decimal_places: int = 2) -> Decimal:
    """
    Round a decimal value to specified decimal places.

    Uses ROUND_HALF_UP, which rounds halves away from zero for negative
    values as well.

    Args:
        value: Decimal value to round
        decimal_places: Number of decimal places (default 2)

    Returns:
        Rounded decimal value
    """
    quantize_value = Decimal(10) ** -decimal_places
    return to_decimal(value).quantize(quantize_value, rounding=ROUND_HALF_UP)


def floor_decimal(value: Numeric, decimal_places: int = 2) -> Decimal:
    """Round a decimal value down (towards negative infinity)."""
    quantize_value = Decimal(10) ** -decimal_places
    return to_decimal(value).quantize(quantize_value, rounding=ROUND_FLOOR)


def sum_decimals(values: List[Decimal]) -> Decimal:
    """
    Sum a list of decimal values.

    Args:
        values: List of decimal values

    Returns:
        Sum of all values
    """
    return sum(values, Decimal("0"))


def to_cents(value: Numeric) -> int:
    """Convert a money value to integer cents, rounding half away from zero."""
    return int(round_decimal(value) * CENTS_PER_UNIT)


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a two-place Decimal."""
    return Decimal(cents).scaleb(-2)


def distribute_remainder(amounts: List[int], remainder: int) -> List[int]:
    """
    Spread leftover cents over allocations in input order.

    A positive remainder gives one cent to each allocation starting from the
    first entry, wrapping around until the remainder is exhausted. A negative
    remainder takes cents back the same way, skipping allocations that are
    already at zero.

    Args:
        amounts: Allocations in integer cents, in input order
        remainder: Signed number of cents still to assign

    Returns:
        New list of allocations whose sum is sum(amounts) + remainder
    """
    if not amounts or remainder == 0:
        return list(amounts)

    if remainder > 0:
        rounds, extra = divmod(remainder, len(amounts))
        return [
            amount + rounds + (1 if index < extra else 0)
            for index, amount in enumerate(amounts)
        ]

    result = list(amounts)
    owed = -remainder
    while owed > 0:
        # Only when nothing is left above zero do entries go negative
        donors = [i for i, amount in enumerate(result) if amount > 0] or list(range(len(result)))
        for index in donors[:owed]:
            result[index] -= 1
        owed -= min(owed, len(donors))
    return result
