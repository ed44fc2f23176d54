"""
Admin Routes — Listing and removing recorded payments.
"""
from fastapi import APIRouter, Depends, HTTPException

from tuition_api.schemas.schemas import MessageResponse, PaymentListResponse
from tuition_api.services.payment_service import PaymentService
from tuition_api.store import PaymentStore, get_store

router = APIRouter(prefix="/api/payments", tags=["Admin"])


@router.get("", response_model=PaymentListResponse)
def list_payments(store: PaymentStore = Depends(get_store)):
    """List every payment in submission order."""
    records = store.list_all()
    return PaymentListResponse(
        count=len(records),
        data=[PaymentService.present(r) for r in records],
    )


@router.delete("/{payment_id}", response_model=MessageResponse)
def delete_payment(payment_id: str, store: PaymentStore = Depends(get_store)):
    if not store.delete_by_id(payment_id):
        raise HTTPException(status_code=404, detail="Data pembayaran tidak ditemukan")
    return MessageResponse(message="Data pembayaran berhasil dihapus")


@router.delete("", response_model=MessageResponse)
def clear_payments(store: PaymentStore = Depends(get_store)):
    """Remove all payments."""
    count = store.clear()
    return MessageResponse(message=f"Berhasil menghapus {count} data pembayaran")
