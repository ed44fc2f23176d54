"""
Payment Service — Builds payment records and runs the submission flow.
"""
import uuid

from tuition_api.config import Settings
from tuition_api.errors import ValidationFailed
from tuition_api.models.payment import PaymentRecord
from tuition_api.schemas.schemas import PaymentSubmission
from tuition_api.services.notification_service import DeliveryResult, EmailNotifier
from tuition_api.services.sheets_service import SheetsClient
from tuition_api.store import PaymentStore
from tuition_api.utils.formatting import build_display, compute_total, format_timestamp
from tuition_api.utils.validators import NormalizedInput, validate_submission


class PaymentService:
    """Server-side authority for payment records."""

    @staticmethod
    def create(value: NormalizedInput, store: PaymentStore, settings: Settings) -> PaymentRecord:
        """Assign an id, compute the total, stamp the time and append to the store.

        Args:
            value: Input that already passed validation.
            store: Ledger the record is appended to.
            settings: Supplies the display timezone.

        Returns:
            The stored PaymentRecord (notification status not yet set).
        """
        record = PaymentRecord(
            id=str(uuid.uuid4()),
            name=value.name,
            email=value.email,
            student_id=value.student_id,
            program=value.program,
            semester=value.semester,
            unique_code=value.unique_code,
            base_amount=value.base_amount,
            total_amount=compute_total(value.base_amount, value.unique_code),
            timestamp=format_timestamp(tz=settings.TIMEZONE),
        )
        return store.append(record)

    @staticmethod
    def submit(
        payload: PaymentSubmission,
        store: PaymentStore,
        notifier: EmailNotifier,
        sheets: SheetsClient,
        settings: Settings,
    ) -> tuple[PaymentRecord, DeliveryResult]:
        """Validate, record, notify and (only after a successful notification) sync to the sheet.

        Raises:
            ValidationFailed: with every violated rule when the payload is invalid.
        """
        result = validate_submission(**payload.model_dump())
        if not result.ok:
            raise ValidationFailed(result.errors)

        record = PaymentService.create(result.value, store, settings)

        delivery = notifier.notify(record)
        record.mark_notification("sent" if delivery.ok else "failed")

        # Sheet errors propagate: the record and email already exist, nothing is rolled back.
        if delivery.ok:
            sheets.append_record(record)

        return record, delivery

    @staticmethod
    def present(record: PaymentRecord) -> dict:
        """Record in wire form plus the rendered amounts shared with the emails."""
        display = build_display(record)
        return {
            **record.to_public(),
            "jumlah_pembayaran_formatted": display.base,
            "total_pembayaran_formatted": display.total,
            "jumlah_transfer_formatted": display.transfer,
        }
