"""
Payment Routes — Tuition payment submission and lookup.
Handles: unique-code suggestion, form submission, receipt lookup by id.
"""
from fastapi import APIRouter, Depends, HTTPException, Request

from tuition_api.config import Settings, get_settings
from tuition_api.schemas.schemas import GenerateCodeResponse, PaymentResponse, PaymentSubmission
from tuition_api.services.notification_service import EmailNotifier, get_notifier
from tuition_api.services.payment_service import PaymentService
from tuition_api.services.sheets_service import SheetsClient, get_sheets
from tuition_api.store import PaymentStore, get_store
from tuition_api.utils.formatting import generate_unique_code

router = APIRouter(prefix="/api", tags=["Payment"])


async def read_submission(request: Request) -> PaymentSubmission:
    """Accept the payment form as JSON, urlencoded or multipart."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
    else:
        form = await request.form()
        body = dict(form)
    return PaymentSubmission.model_validate(body)


@router.get("/generate-code", response_model=GenerateCodeResponse)
def generate_code():
    """Suggest a 3-digit unique code for the client to submit with the form."""
    return GenerateCodeResponse(data={"kode_unik": generate_unique_code()})


@router.post("/payments", response_model=PaymentResponse)
def submit_payment(
    payload: PaymentSubmission = Depends(read_submission),
    store: PaymentStore = Depends(get_store),
    notifier: EmailNotifier = Depends(get_notifier),
    sheets: SheetsClient = Depends(get_sheets),
    settings: Settings = Depends(get_settings),
):
    """Record a payment, email the confirmation and mirror it to the spreadsheet."""
    record, _delivery = PaymentService.submit(payload, store, notifier, sheets, settings)

    data = PaymentService.present(record)
    data["redirect_url"] = f"{settings.SUCCESS_PAGE_PATH}?id={record.id}"

    return PaymentResponse(message="Pembayaran berhasil direkam", data=data)


@router.get("/payments/{payment_id}", response_model=PaymentResponse)
def get_payment(payment_id: str, store: PaymentStore = Depends(get_store)):
    """Get one payment by id (used by the success page)."""
    record = store.find_by_id(payment_id)
    if not record:
        raise HTTPException(status_code=404, detail="Data pembayaran tidak ditemukan")

    return PaymentResponse(data=PaymentService.present(record))
