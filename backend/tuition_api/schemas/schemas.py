"""
Pydantic Schemas — Request & Response models for the payment API.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


# ──────────────── Health ────────────────

class HealthResponse(BaseModel):
    status: str = "healthy"
    message: str
    timestamp: str


# ──────────────── Unique Code ────────────────

class UniqueCodeData(BaseModel):
    kode_unik: str


class GenerateCodeResponse(BaseModel):
    success: bool = True
    data: UniqueCodeData


# ──────────────── Payment ────────────────

class PaymentSubmission(BaseModel):
    """Raw form bag. Values stay untyped here; validate_submission() normalizes them."""
    name: Any = Field(None, alias="nama")
    email: Any = None
    student_id: Any = Field(None, alias="nim")
    program: Any = Field(None, alias="prodi")
    semester: Any = None
    unique_code: Any = Field(None, alias="kode_unik")
    base_amount: Any = Field(None, alias="jumlah_pembayaran")

    class Config:
        populate_by_name = True


class PaymentResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: Dict[str, Any]


class PaymentListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[Dict[str, Any]]


# ──────────────── Generic ────────────────

class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: Optional[List[str]] = None
