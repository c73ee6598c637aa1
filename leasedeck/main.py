from __future__ import annotations

import logging
import os
import time
import uuid
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the package directory so ALLOWED_ORIGINS etc. are available
load_dotenv(Path(__file__).resolve().parent / ".env")

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.middleware.base import BaseHTTPMiddleware

from leasedeck import __version__
from leasedeck.engine import analyze_scenario
from leasedeck.models import CashflowResponse, LeaseScenario
from leasedeck.routes.proposals import router as proposals_router

# Version for /health and the startup log
VERSION = (os.environ.get("GIT_COMMIT") or "").strip() or "unknown"

# Same logger as uvicorn so request lines and app lines interleave
_LOG = logging.getLogger("uvicorn.error")

app = FastAPI(title="Lease Deck Cashflow Engine", version=__version__)

# CORS: use ALLOWED_ORIGINS env (comma-separated) if set, else default
_origins_env = os.environ.get("ALLOWED_ORIGINS", "").strip()
if _origins_env:
    ALLOWED_ORIGINS = [o.strip() for o in _origins_env.split(",") if o.strip()]
else:
    ALLOWED_ORIGINS = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        _LOG.info(
            "request_id=%s method=%s path=%s status=%s duration_ms=%.0f",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        response.headers["X-Request-Id"] = request_id
        return response


app.add_middleware(RequestLogMiddleware)
app.include_router(proposals_router)


@app.on_event("startup")
def startup_log() -> None:
    port = os.environ.get("PORT", "8010")
    host = os.environ.get("HOST", "127.0.0.1")
    _LOG.info("Backend starting on http://%s:%s version=%s commit=%s", host, port, __version__, VERSION)


@app.get("/health")
def health():
    return {"status": "ok", "version": VERSION}


@app.get("/version")
def version():
    return {
        "version": __version__,
        "git_commit": os.getenv("GIT_COMMIT", ""),
        "source_file": str(Path(__file__).resolve()),
    }


CASHFLOW_EXPECTED = (
    "LeaseScenario JSON: id?, name?, rsf, lease_type (FS|NNN), base_year?, expense_stop_psf?, "
    "key_dates: {commencement, rent_start?, expiration} (YYYY-MM-DD), "
    "operating?: {est_op_ex_psf, escalation_method (fixed|cpi), escalation_value}, "
    "rent_schedule: [{period_start, period_end, rent_psf, escalation_percentage?, free_rent_months?, "
    "abatement_applies_to (base_only|base_plus_nnn)?}], parking?, cashflow_settings?: {discount_rate}"
)


def _validation_failed(rid: str, details: str) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "error": "cashflow_validation_failed",
            "rid": rid,
            "details": details,
            "expected": CASHFLOW_EXPECTED,
        },
    )


@app.post("/cashflow", response_model=CashflowResponse)
async def cashflow_endpoint(request: Request) -> CashflowResponse | JSONResponse:
    """
    Annual cash flow and metrics for one scenario.
    Body: single JSON object (LeaseScenario), NOT wrapped in {"scenario": ...}.
    """
    rid = getattr(request.state, "request_id", None) or "no-rid"
    try:
        body = await request.json()
    except ValueError as e:
        err = str(e)[:400]
        _LOG.info("CASHFLOW_ERR rid=%s stage=parse err=%s", rid, err)
        return _validation_failed(rid, err)
    try:
        scenario = LeaseScenario.model_validate(body)
    except ValidationError as e:
        err = str(e)[:400]
        _LOG.info("CASHFLOW_ERR rid=%s stage=validate err=%s", rid, err)
        return _validation_failed(rid, err)

    _LOG.info(
        "CASHFLOW_START rid=%s scenario=%s lease_type=%s periods=%s",
        rid,
        scenario.id,
        scenario.lease_type,
        len(scenario.rent_schedule),
    )
    try:
        result = analyze_scenario(scenario)
    except Exception as e:
        _LOG.error("CASHFLOW_ERR rid=%s stage=compute err=%s", rid, str(e)[:400])
        raise
    _LOG.info("CASHFLOW_DONE rid=%s years=%s npv=%.2f", rid, result.metrics.total_years, result.metrics.npv)
    return result


def get_app() -> FastAPI:
    """
    Convenience accessor for ASGI servers.
    """
    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "leasedeck.main:app",
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8010")),
        reload=True,
    )
