"""
API Errors — Exceptions mapped to JSON error responses in main.py.
"""


class ValidationFailed(Exception):
    """Client input broke one or more rules. Carries every message, in rule order."""

    def __init__(self, errors: list[str]):
        super().__init__("Validasi gagal")
        self.errors = errors
