"""API routes"""
import json
import math
from datetime import datetime
from typing import Optional

from config.logger import logger
from core.exceptions import PayloadTooLargeError
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from models.schemas import (
    ApiInfoResponse,
    ErrorResponse,
    HealthResponse,
    SubmitResponse,
    ValidationErrorResponse,
)
from services.producer import SimulatedProducer
from services.storage import TelemetryStore
from services.validator import validate

router = APIRouter()


def get_store(request: Request) -> TelemetryStore:
    return request.app.state.store


def get_producer(request: Request) -> SimulatedProducer:
    return request.app.state.producer


def clamp_history_limit(raw: Optional[str], capacity: int, default: int) -> int:
    """Turn the ?limit= query value into a bound within [1, capacity]"""
    try:
        limit = float(raw) if raw is not None else float(default)
    except ValueError:
        limit = float(default)
    if not math.isfinite(limit):
        limit = float(default)
    return max(1, min(capacity, math.floor(limit)))


def reject_constant(name: str):
    """Refuse the non-standard NaN and Infinity literals json.loads accepts"""
    raise ValueError(f"Invalid JSON constant: {name}")


async def read_body(request: Request, max_bytes: int) -> bytes:
    """Read the request body, refusing payloads over max_bytes"""
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            raise PayloadTooLargeError(f"body exceeds {max_bytes} bytes")
    return bytes(body)


@router.get("/", response_model=ApiInfoResponse)
async def home():
    """API info endpoint"""
    return {
        "message": "Vehicle Telemetry Server",
        "latest": "/api/telemetry/latest",
        "history": "/api/telemetry/history?limit=10",
        "submit": "/api/telemetry",
        "status": "running"
    }


@router.get("/health", response_model=HealthResponse)
async def health(
    store: TelemetryStore = Depends(get_store),
    producer: SimulatedProducer = Depends(get_producer),
):
    """Health check endpoint"""
    return {
        "status": "ok",
        "timestamp": datetime.now().isoformat(),
        "history_count": len(store),
        "history_capacity": store.capacity,
        "producer_running": producer.running,
        "producer_ticks": producer.ticks,
    }


@router.get(
    "/api/telemetry/latest",
    responses={404: {"model": ErrorResponse}},
)
async def get_latest(store: TelemetryStore = Depends(get_store)):
    """Most recent reading, exactly as it was stored"""
    latest = store.latest()
    if latest is None:
        return JSONResponse(status_code=404, content={"error": "No telemetry available yet"})
    return JSONResponse(content=latest)


@router.get("/api/telemetry/history")
async def get_history(
    request: Request,
    limit: Optional[str] = None,
    store: TelemetryStore = Depends(get_store),
):
    """Last N readings, oldest first (N clamped to the history capacity)"""
    settings = request.app.state.settings
    n = clamp_history_limit(limit, store.capacity, settings.default_history_limit)
    return JSONResponse(content=store.recent(n))


@router.post(
    "/api/telemetry",
    status_code=201,
    response_model=SubmitResponse,
    responses={
        400: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        422: {"model": ValidationErrorResponse},
    },
)
async def submit_telemetry(request: Request, store: TelemetryStore = Depends(get_store)):
    """Validate a pushed reading and append it to the store"""
    settings = request.app.state.settings
    try:
        body = await read_body(request, settings.max_payload_bytes)
    except PayloadTooLargeError:
        return JSONResponse(status_code=413, content={"error": "Payload too large"})

    try:
        payload = json.loads(body, parse_constant=reject_constant)
    except (ValueError, RecursionError):
        # JSONDecodeError, bad UTF-8, NaN/Infinity literals, oversized ints, deep nesting
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})

    result = validate(payload)
    if isinstance(result, list):
        logger.info(f"Rejected telemetry submission with {len(result)} defect(s)")
        return JSONResponse(
            status_code=422,
            content={"error": "Validation failed", "details": [defect.message for defect in result]},
        )

    store.append(result)
    logger.debug(f"Stored submitted reading at {result['timestamp']}")
    return JSONResponse(status_code=201, content={"ok": True, "stored": result})
