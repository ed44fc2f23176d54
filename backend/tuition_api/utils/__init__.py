from tuition_api.utils.formatting import group_digits, format_rupiah, merge_unique_code, format_timestamp
from tuition_api.utils.validators import validate_submission, validate_email, parse_int

__all__ = [
    "group_digits", "format_rupiah", "merge_unique_code", "format_timestamp",
    "validate_submission", "validate_email", "parse_int",
]
