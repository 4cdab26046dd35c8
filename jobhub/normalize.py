"""Turn raw JSearch field values into en-US display strings.

Pure functions, no I/O. Zero salaries and zero months of experience are
treated as "not specified" by default, same as null; pass
``zero_is_missing=False`` to show them as values.
"""
from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, localcontext

NOT_SPECIFIED = "Not specified"
UNKNOWN_DATE = "Unknown"
DEFAULT_CURRENCY = "USD"

# en-US currency symbols; any other ISO code is shown as a prefix
CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
    "CNY": "CN¥",
    "CAD": "CA$",
    "AUD": "A$",
    "NZD": "NZ$",
    "HKD": "HK$",
    "MXN": "MX$",
    "BRL": "R$",
    "KRW": "₩",
    "ILS": "₪",
    "VND": "₫",
    "PHP": "₱",
    "TWD": "NT$",
    "XAF": "FCFA",
}

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _present(value: float | None, zero_is_missing: bool) -> bool:
    if value is None or not math.isfinite(value):
        return False
    return not (zero_is_missing and value == 0)


def format_money(amount: float, currency: str | None = DEFAULT_CURRENCY) -> str:
    """``50000, "USD"`` -> ``"$50,000"`` (no fraction digits, half-up).

    Codes without a symbol are separated from the digits by a no-break
    space (U+00A0). Non-finite amounts raise ``ValueError``.
    """
    if not math.isfinite(amount):
        raise ValueError(f"cannot format non-finite amount {amount!r}")
    code = (currency or "").strip().upper()
    if len(code) != 3 or not code.isalpha():
        code = DEFAULT_CURRENCY
    with localcontext() as ctx:
        # enough digits for any finite float
        ctx.prec = 400
        whole = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if whole < 0 else ""
    digits = f"{abs(int(whole)):,}"
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{code}\u00a0{digits}"
    return f"{sign}{symbol}{digits}"


def format_salary(
    salary_min: float | None,
    salary_max: float | None,
    currency: str | None = DEFAULT_CURRENCY,
    *,
    zero_is_missing: bool = True,
) -> str:
    has_min = _present(salary_min, zero_is_missing)
    has_max = _present(salary_max, zero_is_missing)
    if has_min and has_max:
        return f"{format_money(salary_min, currency)} - {format_money(salary_max, currency)}"
    if has_min:
        return format_money(salary_min, currency)
    if has_max:
        return format_money(salary_max, currency)
    return NOT_SPECIFIED


def parse_datetime(raw: str | None) -> datetime | None:
    """Parse an ISO-8601 date or date-time; ``None`` when it cannot be read."""
    if not raw or not isinstance(raw, str):
        return None
    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_date(raw: str | None) -> str:
    """``"2024-03-15T00:00:00Z"`` -> ``"Mar 15, 2024"``; unreadable -> ``"Unknown"``."""
    parsed = parse_datetime(raw)
    if parsed is None:
        return UNKNOWN_DATE
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def format_experience_years(
    required_months: int | None,
    *,
    zero_is_missing: bool = True,
) -> str:
    if not _present(required_months, zero_is_missing):
        return NOT_SPECIFIED
    return f"{int(required_months) // 12} years"


def format_location(city: str | None, state: str | None, country: str | None = None) -> str:
    parts = [p.strip() for p in (city, state, country) if p and p.strip()]
    return ", ".join(parts) if parts else "Location not specified"
