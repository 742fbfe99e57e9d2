from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

CURRENCY_SYMBOLS = "$€£"


def parse_amount(value) -> float:
    """Parse a typed amount such as ``"1,250.00"``, ``"-€40"`` or ``"(12.50)"``.

    Parentheses and a leading minus both mean an outflow. The result is
    rounded to cents and returned as a float, the type the forecast works in.
    """
    if value is None:
        raise ValueError("missing amount")
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    if not text:
        raise ValueError("empty amount")

    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1]
    for symbol in CURRENCY_SYMBOLS:
        text = text.replace(symbol, "")
    text = text.replace(",", "").replace(" ", "")

    try:
        amount = Decimal(text).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"invalid amount: {value!r}") from exc

    return float(-amount if negative else amount)
