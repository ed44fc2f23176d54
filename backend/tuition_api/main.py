"""
Tuition Payment API — FastAPI Application Entry Point

Aggregates all routers, configures middleware and error responses, wires the
in-memory store and the email/sheets clients, and serves the static frontend.
"""
import os
import time
import traceback
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from tuition_api.config import get_settings
from tuition_api.errors import ValidationFailed
from tuition_api.routes import payment_router, admin_router
from tuition_api.schemas.schemas import ErrorResponse, HealthResponse
from tuition_api.services.notification_service import EmailNotifier
from tuition_api.services.sheets_service import SheetsClient
from tuition_api.store import PaymentStore

settings = get_settings()

# ─── Application Instance ───────────────────────────────────────────
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "API for online tuition payments. Records student payment submissions with a "
        "unique transfer code, emails a confirmation and mirrors each payment to Google Sheets."
    ),
    docs_url="/docs",
    redoc_url="/redoc",
)

# Process-lifetime collaborators, injected into routes via dependencies
app.state.store = PaymentStore()
app.state.notifier = EmailNotifier(settings)
app.state.sheets = SheetsClient(settings)


# ─── Startup ─────────────────────────────────────────────────────────
@app.on_event("startup")
def on_startup():
    """Log boot info."""
    os.makedirs(settings.LOG_DIR, exist_ok=True)

    boot_msg = (
        f"\n{'='*60}\n"
        f"  {settings.APP_NAME} v{settings.APP_VERSION}\n"
        f"  TIME: {datetime.now().isoformat()}\n"
        f"  EMAIL: {'[OK] Ready' if settings.email_configured else '[!] Not configured (mock mode)'}\n"
        f"  SHEETS: {'[OK] Ready' if settings.sheets_configured else '[!] Not configured'}\n"
        f"  STORAGE: In-memory ({len(app.state.store)} records)\n"
        f"  DEBUG: {settings.DEBUG}\n"
        f"{'='*60}\n"
    )
    print(boot_msg)

    log_file = os.path.join(settings.LOG_DIR, "server.log")
    with open(log_file, "a") as f:
        f.write(boot_msg)


# ─── Middleware ──────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with timing."""
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 1)

    if request.url.path.startswith("/api"):
        print(f"  -> {request.method} {request.url.path} -> {response.status_code} ({duration}ms)")

    return response


# ─── Error Responses ─────────────────────────────────────────────────
@app.exception_handler(ValidationFailed)
async def validation_failed_handler(request: Request, exc: ValidationFailed):
    body = ErrorResponse(message="Validasi gagal", errors=exc.errors)
    return JSONResponse(status_code=400, content=body.model_dump())


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    body = ErrorResponse(message=str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    """Unexpected faults: full traceback in the server log, generic message to the client."""
    print(f"[ERROR] {request.method} {request.url.path} failed: {exc!r}")
    traceback.print_exception(type(exc), exc, exc.__traceback__)
    body = ErrorResponse(message="Kesalahan server")
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


# ─── API Routers ─────────────────────────────────────────────────────
app.include_router(payment_router)
app.include_router(admin_router)


@app.get("/api/health", tags=["Health"], response_model=HealthResponse)
def health():
    """Liveness check."""
    return HealthResponse(
        message="Payment System API is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


# ─── Serve Frontend (Static Files) ──────────────────────────────────
FRONTEND_DIR = Path(__file__).resolve().parent.parent.parent / "frontend"

if FRONTEND_DIR.exists():
    # API routers are included above, so they take precedence over the mount.
    app.mount("/", StaticFiles(directory=str(FRONTEND_DIR), html=True), name="frontend")
