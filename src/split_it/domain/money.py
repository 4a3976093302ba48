"""Money helpers using Decimal with cent precision rules."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

MONEY_PRECISION = Decimal("0.01")
CURRENCY_SYMBOL = "$"
MAX_AMOUNT = Decimal("999999999999.99")


def quantize_money(value: Decimal) -> Decimal:
    """Return value rounded to two decimal places with HALF_UP strategy."""

    return value.quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def parse_money(value: Decimal | str | int | float) -> Decimal | None:
    """Parse user input into a quantized Decimal.

    Returns None when the value is not a finite number or does not fit in
    cent precision, so callers can report the failure with their own error
    kind.
    """

    if isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value).strip())
        if not amount.is_finite():
            return None
        return quantize_money(amount)
    except (InvalidOperation, ValueError):
        return None


def format_money(value: Decimal) -> str:
    """Render money as string with exactly two decimal places."""

    quantized = quantize_money(value)
    if quantized.is_zero():
        # avoid "-0.00" for residues that round to zero
        quantized = abs(quantized)
    return f"{quantized:.2f}"


def format_currency(value: Decimal) -> str:
    """Render money with currency symbol, sign before the symbol."""

    rendered = format_money(abs(value))
    if quantize_money(value) < 0:
        return f"-{CURRENCY_SYMBOL}{rendered}"
    return f"{CURRENCY_SYMBOL}{rendered}"


def format_signed(value: Decimal) -> str:
    """Render a balance with an explicit plus sign for positive amounts."""

    rendered = format_money(value)
    if quantize_money(value) > 0:
        return f"+{rendered}"
    return rendered
