"""
Module Utils
============

General-purpose helpers of KiteDash.

Includes:
- Formatting: euros (`fmt_eur`, `fmt_signed_eur`), months (`fmt_month`) and
  percentages (`fmt_percent`).
- Parsing: amounts typed in forms (`parse_amount`), dates (`coerce_data`) and
  month keys (`to_month`).

Notes
-----
- `fmt_eur` rounds to whole euros with ROUND_HALF_UP and groups thousands
  with a space, the way the center writes amounts: `1 234 €`.
- All helpers accept int/float/str/Decimal and never raise on bad numbers
  (they fall back to 0); `coerce_data` is the exception and raises
  `ValueError` on an unreadable date.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


# -----------------------------------------------------------------------------
# Formatting
# -----------------------------------------------------------------------------
def _to_decimal(valor) -> Decimal:
    """Converts `valor` to Decimal, returning 0 on failure."""
    if isinstance(valor, Decimal):
        return valor
    try:
        return Decimal(str(valor))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_eur(valor) -> int:
    """Rounds to whole euros (half up)."""
    return int(_to_decimal(valor).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def fmt_eur(valor) -> str:
    """
    Formats an amount in whole euros: `1 234 €`, `-56 €`.
    """
    n = round_eur(valor)
    s = f"{abs(n):,}".replace(",", " ")
    return f"-{s} €" if n < 0 else f"{s} €"


def fmt_signed_eur(valor) -> str:
    """Same as `fmt_eur` with an explicit `+` for zero and positive amounts."""
    n = round_eur(valor)
    return f"+{fmt_eur(n)}" if n >= 0 else fmt_eur(n)


def fmt_percent(valor, casas: int = 0) -> str:
    """
    Formats a share already expressed in percent. Ex.: `15` -> `15%`,
    `12.5` with `casas=1` -> `12.5%`.
    """
    v = _to_decimal(valor)
    return f"{{:.{casas}f}}%".format(v)


def fmt_month(yyyymm: str) -> str:
    """
    Formats a month key as `Feb 2026`.

    Unreadable keys are returned unchanged.
    """
    try:
        y, m = str(yyyymm).split("-")[:2]
        return f"{_MONTH_ABBR[int(m) - 1]} {int(y)}"
    except (ValueError, IndexError):
        return str(yyyymm)


def fmt_booking_number(number) -> str:
    """Booking number as displayed everywhere: `#007`."""
    try:
        return f"#{int(number):03d}"
    except (TypeError, ValueError):
        return "#---"


# -----------------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------------
_LETTER_RE = re.compile(r"[^\W\d_]")


def _finite(valor) -> float:
    """float(valor), or 0.0 for inf / nan."""
    try:
        v = float(valor)
    except (ValueError, OverflowError):
        return 0.0
    return v if math.isfinite(v) else 0.0


def parse_amount(valor) -> float:
    """
    Converts an amount typed in a form to float.

    Accepts:
    - "1234.56", "1 234,56", "1,234.56", "€ 80", 80
    Invalid values return 0.0, and so do text with letters ("1e400", "12abc")
    and non-finite numbers (inf, nan), so a positive-amount guard rejects them.

    Separator heuristics: the right-most of ',' and '.' is the decimal
    separator; the other one is a thousands separator.
    """
    if isinstance(valor, bool):
        return 0.0
    if isinstance(valor, (int, float, Decimal)):
        return _finite(valor)
    if valor is None:
        return 0.0
    if _LETTER_RE.search(str(valor)):
        return 0.0

    txt = re.sub(r"[^\d,.\-]", "", str(valor))
    if not txt:
        return 0.0

    dot, comma = txt.rfind("."), txt.rfind(",")
    if dot != -1 and comma != -1:
        if comma > dot:
            txt = txt.replace(".", "").replace(",", ".")
        else:
            txt = txt.replace(",", "")
    elif comma != -1:
        txt = txt.replace(",", ".")

    try:
        return _finite(Decimal(txt))
    except InvalidOperation:
        return 0.0


def coerce_data(value=None) -> date:
    """
    Normalizes `value` to datetime.date.
    Accepts: None, date, datetime, 'YYYY-MM-DD', 'DD/MM/YYYY', 'DD-MM-YYYY'.
    Empty/None returns today.
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        for fmt in ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y"):
            try:
                return datetime.strptime(value.strip(), fmt).date()
            except ValueError:
                continue
    raise ValueError(f"Invalid date: {value!r}")


def to_iso(value=None) -> str:
    """`coerce_data` as an ISO string (`YYYY-MM-DD`)."""
    return coerce_data(value).isoformat()


def to_month(value) -> str:
    """
    Month key (`YYYY-MM`) of a date, datetime or ISO string.

    Strings are cut to their first 7 characters, so both `2026-02-14` and
    `2026-02` give `2026-02`.
    """
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m")
    return str(value or "")[:7]
