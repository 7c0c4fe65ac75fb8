from decimal import Decimal, InvalidOperation
from typing import Any


def to_decimal(value: Any) -> Decimal:
    """
    Single parsing boundary for monetary values.

    Accepts Decimal, int, float and numeric strings (as the ORM and JSON
    payloads deliver them). None and blank strings read as zero; unparsable
    or non-finite input (NaN, Infinity) raises ValueError.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        raise TypeError("Boolean is not a monetary value.")
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, float):
        parsed = Decimal(str(value))
    else:
        try:
            parsed = Decimal(str(value).strip() or "0")
        except InvalidOperation as e:
            raise ValueError(f"Not a monetary value: {value!r}") from e
    if not parsed.is_finite():
        raise ValueError(f"Not a finite monetary value: {value!r}")
    return parsed
