from datetime import date
from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


def format_price(value) -> Decimal:
    """Normalizes a price to two decimal places."""
    return Decimal(str(value)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def today() -> str:
    return date.today().isoformat()
