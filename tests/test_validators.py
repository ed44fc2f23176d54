import pytest
from pydantic import ValidationError

from tuition_api.utils.validators import parse_int, validate_email, validate_submission

VALID = dict(
    name="Siti Aminah",
    email="siti@example.ac.id",
    student_id="2021040123",
    program="Teknik Informatika",
    semester="3",
    unique_code="123",
    base_amount="1500000",
)


def _submit(**overrides):
    return validate_submission(**{**VALID, **overrides})


def test_valid_submission_is_trimmed_and_typed():
    result = _submit(name="  Siti Aminah  ", email=" siti@example.ac.id ", semester=" 3", base_amount=1500000)
    assert result.ok
    assert result.errors == []
    assert result.value.name == "Siti Aminah"
    assert result.value.email == "siti@example.ac.id"
    assert result.value.semester == 3
    assert result.value.base_amount == 1_500_000


def test_errors_accumulate_in_rule_order():
    result = _submit(name="", email="bad", semester=0)
    assert not result.ok
    assert result.value is None
    assert result.errors == ["Nama minimal 3 karakter", "Email tidak valid", "Semester harus 1–8"]


def test_every_rule_reported_at_once():
    result = validate_submission()
    assert result.errors == [
        "Nama minimal 3 karakter",
        "Email tidak valid",
        "NIM minimal 5 karakter",
        "Program studi wajib dipilih",
        "Semester harus 1–8",
        "Jumlah pembayaran tidak valid",
        "Kode unik harus berupa 1–3 digit angka",
    ]


@pytest.mark.parametrize(
    "amount, error",
    [
        (99_999, "Minimal Rp 100.000"),
        (100_000, None),
        (10_000_000, None),
        (10_000_001, "Maksimal Rp 10.000.000"),
        ("abc", "Jumlah pembayaran tidak valid"),
    ],
)
def test_amount_bounds(amount, error):
    result = _submit(base_amount=amount)
    if error is None:
        assert result.ok
    else:
        assert result.errors == [error]


def test_unparseable_amount_suppresses_bound_checks():
    result = _submit(base_amount="")
    assert result.errors == ["Jumlah pembayaran tidak valid"]


@pytest.mark.parametrize("semester", ["0", "9", "x", None, -1])
def test_semester_out_of_range(semester):
    assert _submit(semester=semester).errors == ["Semester harus 1–8"]


def test_whitespace_only_fields_are_missing():
    result = _submit(name="   ", student_id="  ", program="  ")
    assert result.errors == [
        "Nama minimal 3 karakter",
        "NIM minimal 5 karakter",
        "Program studi wajib dipilih",
    ]


@pytest.mark.parametrize("code, padded", [("7", "007"), ("45", "045"), ("999", "999"), (" 123 ", "123")])
def test_unique_code_is_zero_padded(code, padded):
    assert _submit(unique_code=code).value.unique_code == padded


@pytest.mark.parametrize("code", ["", "1234", "12a", None])
def test_invalid_unique_code(code):
    assert _submit(unique_code=code).errors == ["Kode unik harus berupa 1–3 digit angka"]


@pytest.mark.parametrize(
    "raw, expected",
    [("42", 42), (" 7 ", 7), ("12abc", 12), ("1.5", 1), (3, 3), (2.9, 2), ("abc", None), (None, None), (True, None)],
)
def test_parse_int_is_lenient(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize(
    "email, ok",
    [("a@b.co", True), ("first.last@uni.ac.id", True), ("bad", False), ("a@b", False), ("a b@c.d", False), ("", False)],
)
def test_validate_email(email, ok):
    assert validate_email(email) is ok


@pytest.mark.parametrize("field", ["base_amount", "semester"])
def test_oversized_digit_runs_are_invalid_not_fatal(field):
    result = _submit(**{field: "9" * 5000})
    assert not result.ok
    expected = "Jumlah pembayaran tidak valid" if field == "base_amount" else "Semester harus 1–8"
    assert result.errors == [expected]


def test_parse_int_rejects_long_digit_runs():
    assert parse_int("1" * 19) is None
    assert parse_int("1" * 18) == int("1" * 18)


@pytest.mark.parametrize("raw", ["٣", "３", "١٥٠٠٠٠٠"])
def test_parse_int_accepts_ascii_digits_only(raw):
    assert parse_int(raw) is None


@pytest.mark.parametrize("code", ["١٢٣", "１２３", "۴۵"])
def test_unique_code_rejects_non_ascii_digits(code):
    assert _submit(unique_code=code).errors == ["Kode unik harus berupa 1–3 digit angka"]


def test_non_ascii_semester_and_amount_are_rejected():
    result = _submit(semester="٣", base_amount="١٥٠٠٠٠٠")
    assert result.errors == ["Semester harus 1–8", "Jumlah pembayaran tidak valid"]


def test_normalized_input_is_immutable():
    value = _submit().value
    with pytest.raises(ValidationError):
        value.base_amount = 1
