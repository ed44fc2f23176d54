"""
Formatting Utilities — Rupiah amounts, unique-code merging and timestamps.
Every rendering of a payment (API response, HTML email, text email) goes
through build_display() so the three never drift apart.
"""
import random
import re
from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel

# Indonesian abbreviated month names (id-ID "medium" date style)
_MONTHS_ID = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")


def group_digits(n: int) -> str:
    """Render a non-negative integer with '.' thousands separators (1234567 -> '1.234.567')."""
    return f"{int(n):,}".replace(",", ".")


def format_rupiah(n: int) -> str:
    return f"Rp {group_digits(n)}"


def merge_unique_code(base_amount, unique_code) -> str:
    """Replace the trailing '.000' group of the grouped amount with the padded code.

    Amounts whose grouped form does not end in '.000' come back unchanged,
    e.g. merge_unique_code(150500, 7) == '150.500'.
    """
    digits = re.sub(r"\D", "", str(base_amount))
    amount = int(digits) if digits else 0
    code = str(unique_code).zfill(3)
    return re.sub(r"\.000$", f".{code}", group_digits(amount))


def compute_total(base_amount: int, unique_code: str) -> int:
    """Authoritative total: base amount plus the integer value of the unique code."""
    return base_amount + int(unique_code)


def format_timestamp(moment: Optional[datetime] = None, tz: str = "Asia/Jakarta") -> str:
    """Render a moment as an Indonesian medium date with short time, e.g. '19 Okt 2026, 14.05'."""
    local = (moment or datetime.now(ZoneInfo(tz))).astimezone(ZoneInfo(tz))
    return f"{local.day} {_MONTHS_ID[local.month - 1]} {local.year}, {local:%H.%M}"


def generate_unique_code() -> str:
    """Suggest a 3-digit unique code in the range 100-999."""
    return str(random.randint(100, 999))


class PaymentDisplay(BaseModel):
    """Pre-rendered amounts for one payment record."""
    base: str        # "Rp 1.500.000"
    total: str       # "Rp 1.500.123"
    transfer: str    # "Rp 1.500.123" (base with the code merged into the last group)
    unique_code: str

    class Config:
        frozen = True


def build_display(record) -> PaymentDisplay:
    """Shared formatter consumed by the API response and both email renderers."""
    return PaymentDisplay(
        base=format_rupiah(record.base_amount),
        total=format_rupiah(record.total_amount),
        transfer=f"Rp {merge_unique_code(record.base_amount, record.unique_code)}",
        unique_code=record.unique_code,
    )
