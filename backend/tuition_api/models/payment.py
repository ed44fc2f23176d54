"""
Payment Record Model — One validated, server-finalized tuition payment.
"""
from typing import Literal, Optional

from pydantic import BaseModel, Field

NotificationStatus = Literal["sent", "failed"]


class PaymentRecord(BaseModel):
    """In-memory payment record. Wire names follow the payment form fields."""

    id: str = Field(..., frozen=True)
    name: str = Field(..., alias="nama", frozen=True)
    email: str = Field(..., frozen=True)
    student_id: str = Field(..., alias="nim", frozen=True)
    program: str = Field(..., alias="prodi", frozen=True)
    semester: int = Field(..., ge=1, le=8, frozen=True)
    unique_code: str = Field(..., alias="kode_unik", frozen=True)         # 3 digits, zero-padded
    base_amount: int = Field(..., alias="jumlah_pembayaran", frozen=True)
    total_amount: int = Field(..., alias="total_pembayaran", frozen=True)  # base_amount + unique_code
    timestamp: str = Field(..., frozen=True)

    notification_status: Optional[NotificationStatus] = Field(None, alias="status")

    class Config:
        populate_by_name = True

    def mark_notification(self, status: NotificationStatus) -> None:
        """Record the notification outcome. Allowed exactly once per record."""
        if self.notification_status is not None:
            raise RuntimeError(f"Notification status already set for payment {self.id}")
        self.notification_status = status

    def to_public(self) -> dict:
        """Serialize with the wire (form) field names."""
        return self.model_dump(by_alias=True)
