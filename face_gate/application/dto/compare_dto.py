from typing import Optional

from pydantic import BaseModel, Field


class CompareRequest(BaseModel):
    """DTO for a face comparison request"""
    base64: Optional[str] = None  # Submitted image, base64 (data URL prefix allowed)
    token: Optional[str] = None  # Notification token, forwarded unmodified


class CompareResponse(BaseModel):
    """DTO for a successful comparison"""
    match: bool
    similarity: float = Field(default=0, ge=0, le=100)


class ValidationErrorResponse(BaseModel):
    """DTO for a rejected request"""
    error: str


class ComparisonErrorResponse(BaseModel):
    """DTO for a failed comparison"""
    error: bool = True
    message: str
