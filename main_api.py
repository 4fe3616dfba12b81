"""
VCF Collector — FastAPI Backend
===============================
Collects contact submissions into one shared ledger, tracks progress
toward the target and serves the collection as a vCard or JSON export.

Start:
    uvicorn main_api:app --reload --port 3000

Interactive docs:
    http://localhost:3000/docs
"""

import logging
import os
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import quote

from dotenv import load_dotenv

load_dotenv()

from fastapi import BackgroundTasks, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from vcfcollector.domain.entities.contact_record import UNKNOWN_ADDRESS, format_timestamp
from vcfcollector.domain.entities.outcome import ResultKind
from vcfcollector.infrastructure.config import cors_origins_from_env
from vcfcollector.use_cases.submit_contact import MSG_REQUIRED, SubmitContactRequest

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(levelname)s  %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ── App ───────────────────────────────────────────────────────────────────────

app = FastAPI(title="VCF Collector API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(cors_origins_from_env()),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
)

# ── Dependency-injection container (initialised at startup) ───────────────────

_SUBMIT_PATHS = ("/api/add-contact", "/api/contacts")

_container = None
_startup_error: Optional[str] = None


def configure(container) -> None:
    """Inject a fully-wired container (ledger already initialised)."""
    global _container, _startup_error
    _container = container
    _startup_error = None


@app.on_event("startup")
async def startup():
    global _container, _startup_error
    if _container is not None:
        return
    try:
        from vcfcollector.infrastructure.config import Config
        from vcfcollector.infrastructure.container import Container

        container = Container(Config.from_env())
        container.ledger.initialize()
        _container = container
        logger.info(
            f"[API] Container initialised | contacts={container.ledger.count} "
            f"target={container.config.target}"
        )
    except Exception as e:
        _startup_error = str(e)
        logger.error(f"[API] Container startup failed: {e}")


class ServiceUnavailable(Exception):
    pass


def get_container():
    if _startup_error:
        raise ServiceUnavailable(f"Service misconfigured: {_startup_error}")
    if _container is None:
        raise ServiceUnavailable("Service not ready.")
    return _container


@app.exception_handler(ServiceUnavailable)
async def service_unavailable_handler(request: Request, exc: ServiceUnavailable):
    return JSONResponse(status_code=503, content={"success": False, "message": str(exc)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # A malformed submission is the same user error as missing fields
    message = MSG_REQUIRED if request.url.path in _SUBMIT_PATHS else "Invalid request body"
    return JSONResponse(status_code=400, content={"success": False, "message": message})


# ── Request models ────────────────────────────────────────────────────────────


class ContactIn(BaseModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    photo: Optional[str] = None


class AdminLoginIn(BaseModel):
    password: Optional[str] = None


# ── Helpers ───────────────────────────────────────────────────────────────────


def _now_iso() -> str:
    return format_timestamp(datetime.now(timezone.utc))


def _server_error(message: str = "Server error") -> JSONResponse:
    return JSONResponse(status_code=500, content={"success": False, "message": message})


def _attachment(filename: str) -> str:
    """Content-Disposition with an ASCII fallback plus an RFC 5987 UTF-8 name."""
    fallback = filename.encode("ascii", "ignore").decode().replace('"', "").strip() or "download"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def _client_address(request: Request) -> str:
    return request.client.host if request.client and request.client.host else UNKNOWN_ADDRESS


# ── Meta ──────────────────────────────────────────────────────────────────────


@app.get("/health", tags=["meta"])
async def health():
    c = get_container()
    return {
        "status": "ONLINE",
        "contacts": c.ledger.count,
        "serverTime": _now_iso(),
    }


@app.get("/api/test", tags=["meta"])
async def api_test():
    return {"success": True, "message": "Server is working!", "time": _now_iso()}


# ── Progress ──────────────────────────────────────────────────────────────────


@app.get("/api/global-count", tags=["contacts"])
@app.get("/api/count", tags=["contacts"])
async def global_count():
    c = get_container()
    try:
        progress = c.progress_use_case.execute()
        return {"success": True, **progress.to_dict()}
    except Exception as e:
        logger.error(f"[API] global-count failed: {e!r}", exc_info=True)
        return _server_error()


# ── Submission ────────────────────────────────────────────────────────────────


@app.post("/api/add-contact", tags=["contacts"])
@app.post("/api/contacts", tags=["contacts"])
async def add_contact(body: ContactIn, request: Request, background_tasks: BackgroundTasks):
    """Submit one contact. Duplicates answer 200 with success=false."""
    c = get_container()
    try:
        result = await c.submit_use_case.execute(
            SubmitContactRequest(
                name=body.name,
                phone=body.phone,
                photo=body.photo,
                source_address=_client_address(request),
            )
        )
    except Exception as e:
        logger.error(f"[API] add-contact failed: {e!r}", exc_info=True)
        return _server_error("Server error. Please try again.")

    if result.kind != ResultKind.OK:
        return JSONResponse(
            status_code=result.kind.http_status,
            content={"success": False, "message": result.message},
        )

    if result.target_just_reached and c.notify_use_case.enabled:
        # Runs after the response is sent; has its own error boundary
        background_tasks.add_task(c.notify_use_case.execute)

    return {
        "success": True,
        "message": result.message,
        "count": result.count,
        "targetReached": result.target_reached,
        "contact": result.record.to_dict(),
    }


# ── Admin ─────────────────────────────────────────────────────────────────────


@app.get("/api/all-contacts", tags=["admin"])
async def all_contacts():
    c = get_container()
    try:
        listing = c.list_use_case.execute()
        return {
            "success": True,
            "contacts": [r.to_dict() for r in listing.contacts],
            "total": listing.total,
            "stats": listing.stats.to_dict(),
        }
    except Exception as e:
        logger.error(f"[API] all-contacts failed: {e!r}", exc_info=True)
        return _server_error()


@app.post("/api/admin/login", tags=["admin"])
async def admin_login(body: AdminLoginIn):
    c = get_container()
    try:
        result = c.admin_use_case.execute(body.password)
    except Exception as e:
        logger.error(f"[API] admin login failed: {e!r}", exc_info=True)
        return _server_error()

    if not result.success:
        return JSONResponse(
            status_code=result.kind.http_status,
            content={"success": False, "message": result.message},
        )
    return {"success": True, "token": result.token, "message": result.message}


# ── Export ────────────────────────────────────────────────────────────────────


@app.get("/api/download-vcf", tags=["export"])
async def download_vcf():
    c = get_container()
    try:
        export = c.export_vcf_use_case.execute()
    except Exception as e:
        logger.error(f"[API] VCF export failed: {e!r}", exc_info=True)
        return _server_error("Error generating VCF")

    if not export.success:
        return JSONResponse(
            status_code=export.kind.http_status,
            content={"success": False, "message": export.message, "count": export.count},
        )
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": _attachment(export.filename)},
    )


@app.get("/api/export/json", tags=["export"])
async def export_json():
    c = get_container()
    try:
        export = c.export_json_use_case.execute()
    except Exception as e:
        logger.error(f"[API] JSON export failed: {e!r}", exc_info=True)
        return _server_error("Export failed")

    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": _attachment(export.filename)},
    )
