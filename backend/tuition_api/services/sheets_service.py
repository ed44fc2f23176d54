"""
Sheets Service — Mirrors payment records into a Google Spreadsheet.
Credentials come either inline from the environment or from a service-account key file.
"""
from fastapi import Request
from google.oauth2 import service_account
from googleapiclient.discovery import build

from tuition_api.config import Settings
from tuition_api.models.payment import PaymentRecord

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


def record_to_row(record: PaymentRecord) -> list:
    """Fixed column order: nama, nim, semester, email, prodi, jumlah, kode unik, waktu."""
    return [
        record.name,
        record.student_id,
        record.semester,
        record.email,
        record.program,
        record.base_amount,
        record.unique_code,
        record.timestamp,
    ]


class SheetsClient:
    """Appends one row per payment. Errors from the Sheets API propagate to the caller."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._service = None

    @property
    def configured(self) -> bool:
        return self.settings.sheets_configured

    def _credentials(self):
        if self.settings.GOOGLE_CLIENT_EMAIL and self.settings.GOOGLE_PRIVATE_KEY:
            info = {
                "client_email": self.settings.GOOGLE_CLIENT_EMAIL,
                # .env files carry the PEM with escaped newlines
                "private_key": self.settings.GOOGLE_PRIVATE_KEY.replace("\\n", "\n"),
                "token_uri": TOKEN_URI,
            }
            return service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
        return service_account.Credentials.from_service_account_file(
            self.settings.GOOGLE_CREDENTIALS_FILE, scopes=SCOPES
        )

    def _get_service(self):
        if self._service is None:
            self._service = build(
                "sheets", "v4", credentials=self._credentials(), cache_discovery=False
            )
        return self._service

    def append_record(self, record: PaymentRecord) -> bool:
        """Append the record's row. Returns False when the sheet is not configured."""
        if not self.configured:
            print(f"[SHEETS] Not configured, skipping sync for payment {record.id}")
            return False

        self._get_service().spreadsheets().values().append(
            spreadsheetId=self.settings.SPREADSHEET_ID,
            range=self.settings.SHEET_RANGE,
            valueInputOption="USER_ENTERED",
            body={"values": [record_to_row(record)]},
        ).execute()
        print(f"[SHEETS] Appended payment {record.id} to {self.settings.SHEET_RANGE}")
        return True


def get_sheets(request: Request) -> SheetsClient:
    """FastAPI dependency: the sheets client created with the application."""
    return request.app.state.sheets
