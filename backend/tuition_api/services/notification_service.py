"""
Notification Service — Payment confirmation emails over SMTP, with a mock mode.
"""
import smtplib
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from typing import Literal, Optional

from fastapi import Request
from pydantic import BaseModel

from tuition_api.config import Settings
from tuition_api.models.payment import PaymentRecord
from tuition_api.services.email_templates import render_html, render_text, subject_for
from tuition_api.utils.formatting import build_display


class DeliveryResult(BaseModel):
    """Outcome of one notification attempt."""
    status: Literal["sent", "mocked", "failed"]
    reason: Optional[str] = None
    message_id: Optional[str] = None

    class Config:
        frozen = True

    @property
    def ok(self) -> bool:
        return self.status in ("sent", "mocked")


class EmailNotifier:
    """Sends payment confirmations. notify() never raises."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def notify(self, record: PaymentRecord) -> DeliveryResult:
        if not self.settings.email_configured:
            print("[EMAIL] Configuration not found. Running in mock mode.")
            return self._send_mock(record)

        try:
            message = self.build_message(record)
            message_id = self._send_smtp(message)
        except Exception as exc:
            print(f"[EMAIL] Sending failed for {record.email}: {exc}")
            if self.settings.EMAIL_FAIL_OPEN:
                return self._send_mock(record, reason=str(exc))
            return DeliveryResult(status="failed", reason=str(exc))

        print(f"[EMAIL] Sent to {record.email}: {message_id}")
        return DeliveryResult(status="sent", message_id=message_id)

    def build_message(self, record: PaymentRecord) -> EmailMessage:
        """Build a multipart/alternative message: plain text first, HTML as the preferred part."""
        display = build_display(record)
        institution = self.settings.INSTITUTION_NAME

        message = EmailMessage()
        message["From"] = formataddr((self.settings.EMAIL_FROM_NAME, self.settings.EMAIL_USER))
        message["To"] = record.email
        message["Subject"] = subject_for(record)
        message["Message-ID"] = make_msgid()
        message.set_content(render_text(record, display, institution))
        message.add_alternative(render_html(record, display, institution), subtype="html")
        return message

    def _send_smtp(self, message: EmailMessage) -> str:
        with smtplib.SMTP(self.settings.EMAIL_HOST, self.settings.EMAIL_PORT, timeout=30) as smtp:
            smtp.starttls()
            smtp.login(self.settings.EMAIL_USER, self.settings.EMAIL_PASS)
            smtp.send_message(message)
        return message["Message-ID"]

    @staticmethod
    def _send_mock(record: PaymentRecord, reason: Optional[str] = None) -> DeliveryResult:
        display = build_display(record)
        print(f"[EMAIL] Mock email sent to: {record.email}")
        print(f"[EMAIL] Payment data: nama={record.name} nim={record.student_id} total={display.transfer}")
        return DeliveryResult(status="mocked", reason=reason)


def get_notifier(request: Request) -> EmailNotifier:
    """FastAPI dependency: the notifier created with the application."""
    return request.app.state.notifier
