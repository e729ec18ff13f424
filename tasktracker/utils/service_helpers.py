from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]


def round_half_up(numerator: Number, denominator: Number) -> int:
    """Round numerator / denominator to the nearest integer, halves going up"""
    ratio = Decimal(str(numerator)) / Decimal(str(denominator))
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def round_currency(amount: Number) -> Decimal:
    return Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
