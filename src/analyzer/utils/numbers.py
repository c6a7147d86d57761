from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, digits: int = 1) -> float:
    """
    Rounds the exact binary value of `value` to `digits` decimals, halves away from zero.

    Unlike the built-in round(), 2.25 becomes 2.3 and 0.125 becomes 0.13,
    which is what a fixed-point display formatter shows.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
