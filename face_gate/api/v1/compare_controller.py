# Standard library imports
import logging
from typing import Union

# External package imports
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.compare_dto import (
    CompareRequest,
    CompareResponse,
    ComparisonErrorResponse,
    ValidationErrorResponse,
)
from ...application.use_cases.access.compare_face import CompareFaceUseCase
from ...di.container import get_container
from ...domain.exceptions import ComparisonError, InvalidImageError, MissingImageError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["access"])


@router.post(
    "/compare",
    response_model=CompareResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ComparisonErrorResponse},
    },
)
async def compare_face(request: CompareRequest) -> Union[CompareResponse, JSONResponse]:
    """
    Compare a submitted face with the reference photo

    Opens the door on a match and sounds the alarm otherwise; a notification
    is queued for the given token in both cases.

    Args:
        request: Base64 image and notification token

    Returns:
        CompareResponse with match flag and similarity
    """
    container = get_container()
    compare_face_use_case = container.get(CompareFaceUseCase)

    try:
        return await compare_face_use_case.execute(request)
    except (MissingImageError, InvalidImageError) as exception:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ValidationErrorResponse(error=str(exception)).model_dump(),
        )
    except ComparisonError as exception:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ComparisonErrorResponse(message=str(exception)).model_dump(),
        )
