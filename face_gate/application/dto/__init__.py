from .compare_dto import (
    CompareRequest,
    CompareResponse,
    ValidationErrorResponse,
    ComparisonErrorResponse,
)

__all__ = [
    "CompareRequest",
    "CompareResponse",
    "ValidationErrorResponse",
    "ComparisonErrorResponse",
]
