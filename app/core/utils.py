from decimal import Decimal, ROUND_HALF_UP, getcontext

getcontext().prec = 28
CENTS= Decimal("0.01")

def qround(d : Decimal) -> Decimal:
    return d.quantize(CENTS, rounding=ROUND_HALF_UP)

def to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    return Decimal(str(value))
