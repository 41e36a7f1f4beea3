"""Response schemas for the HTTP API"""
from typing import Any, Dict, List

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Schema for health check"""
    status: str
    timestamp: str
    history_count: int
    history_capacity: int
    producer_running: bool
    producer_ticks: int


class ApiInfoResponse(BaseModel):
    """Schema for API info"""
    message: str
    latest: str
    history: str
    submit: str
    status: str


class ErrorResponse(BaseModel):
    """Schema for error responses"""
    error: str


class ValidationErrorResponse(ErrorResponse):
    """Schema for rejected submissions"""
    details: List[str]


class SubmitResponse(BaseModel):
    """Schema for accepted submissions"""
    ok: bool
    stored: Dict[str, Any]
