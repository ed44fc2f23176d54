"""
Validators — Normalization and rule-based validation for payment submissions.
"""
import math
import re
from typing import Any, List, Optional

from pydantic import BaseModel

MIN_AMOUNT = 100_000
MAX_AMOUNT = 10_000_000
MIN_SEMESTER, MAX_SEMESTER = 1, 8
MAX_INT_DIGITS = 18  # longer digit runs count as unparseable

# ASCII digits only: the code and amounts end up in bank transfers and the sheet
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")
_UNIQUE_CODE_RE = re.compile(r"^[0-9]{1,3}$")


class NormalizedInput(BaseModel):
    name: str
    email: str
    student_id: str
    program: str
    semester: int
    unique_code: str  # zero-padded, always 3 digits
    base_amount: int

    class Config:
        frozen = True


class ValidationResult(BaseModel):
    ok: bool
    value: Optional[NormalizedInput] = None
    errors: List[str] = []


def clean_str(value: Any) -> Optional[str]:
    """Trim a form value; None stays None, other scalars are stringified first."""
    if value is None:
        return None
    return str(value).strip()


def parse_int(value: Any) -> Optional[int]:
    """Lenient integer parse: takes the leading digits of a string, like a form parseInt.

    Returns None when nothing parseable is found or the digit run is too long.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT_RE.match(str(value))
    if not match or len(match.group(1).lstrip("+-")) > MAX_INT_DIGITS:
        return None
    return int(match.group(1))


def validate_email(email: str | None) -> bool:
    """Basic local@domain.tld shape check."""
    if not email:
        return False
    return bool(_EMAIL_RE.match(email))


def validate_amount(amount: int | None) -> list[str]:
    """Check a payment amount; an unparseable amount suppresses the bound checks."""
    if amount is None:
        return ["Jumlah pembayaran tidak valid"]
    if amount < MIN_AMOUNT:
        return ["Minimal Rp 100.000"]
    if amount > MAX_AMOUNT:
        return ["Maksimal Rp 10.000.000"]
    return []


def normalize_unique_code(code: str | None) -> Optional[str]:
    """Zero-pad a 1-3 digit code to exactly 3 digits; anything else is None."""
    if not code or not _UNIQUE_CODE_RE.match(code):
        return None
    return code.zfill(3)


def validate_submission(
    name: Any = None,
    email: Any = None,
    student_id: Any = None,
    program: Any = None,
    semester: Any = None,
    unique_code: Any = None,
    base_amount: Any = None,
) -> ValidationResult:
    """Normalize a raw submission and collect every violated rule, in a fixed order."""
    name = clean_str(name)
    email = clean_str(email)
    student_id = clean_str(student_id)
    program = clean_str(program)
    code = normalize_unique_code(clean_str(unique_code))
    semester_num = parse_int(semester)
    amount = parse_int(base_amount)

    errors: list[str] = []
    if not name or len(name) < 3:
        errors.append("Nama minimal 3 karakter")
    if not validate_email(email):
        errors.append("Email tidak valid")
    if not student_id or len(student_id) < 5:
        errors.append("NIM minimal 5 karakter")
    if not program:
        errors.append("Program studi wajib dipilih")
    if semester_num is None or not MIN_SEMESTER <= semester_num <= MAX_SEMESTER:
        errors.append("Semester harus 1–8")
    errors.extend(validate_amount(amount))
    if code is None:
        errors.append("Kode unik harus berupa 1–3 digit angka")

    if errors:
        return ValidationResult(ok=False, errors=errors)

    return ValidationResult(
        ok=True,
        value=NormalizedInput(
            name=name,
            email=email,
            student_id=student_id,
            program=program,
            semester=semester_num,
            unique_code=code,
            base_amount=amount,
        ),
    )
