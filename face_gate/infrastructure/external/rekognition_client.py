"""AWS Rekognition face comparison gateway."""

# Standard library imports
import asyncio
import logging
from typing import Any, Dict, Optional

# External package imports
import boto3
from botocore.exceptions import BotoCoreError, ClientError

# Local application imports
from ...core.config import get_settings
from ...domain.exceptions import ComparisonError
from ...domain.models import ComparisonResult

logger = logging.getLogger(__name__)


class RekognitionComparisonClient:
    """
    Compares a submitted face against the reference face with Rekognition CompareFaces.

    The boto3 call is blocking, so it runs in a worker thread.
    """

    def __init__(
        self,
        rekognition_client: Optional[Any] = None,
        similarity_threshold: Optional[float] = None,
    ) -> None:
        """
        Args:
            rekognition_client: Pre-built boto3 rekognition client. If None, built from settings.
            similarity_threshold: Minimum similarity for a candidate to count as a match.
        """
        settings = get_settings()
        self.similarity_threshold = (
            similarity_threshold if similarity_threshold is not None else settings.similarity_threshold
        )
        self._client = rekognition_client

    @property
    def client(self) -> Any:
        if self._client is None:
            settings = get_settings()
            self._client = boto3.client(
                "rekognition",
                region_name=settings.aws_region,
                aws_access_key_id=settings.aws_access_key_id,
                aws_secret_access_key=settings.aws_secret_access_key,
                aws_session_token=settings.aws_session_token,
            )
        return self._client

    async def compare(self, source_bytes: bytes, reference_bytes: bytes) -> ComparisonResult:
        """
        Compare the submitted image with the reference image.

        Args:
            source_bytes: Image submitted by the client
            reference_bytes: Stored reference image

        Returns:
            ComparisonResult with matched flag and top similarity

        Raises:
            ComparisonError: On any provider failure (auth, quota, bad image, network)
        """
        try:
            response = await asyncio.to_thread(
                self.client.compare_faces,
                SourceImage={"Bytes": source_bytes},
                TargetImage={"Bytes": reference_bytes},
                SimilarityThreshold=self.similarity_threshold,
            )
        except ClientError as e:
            error = e.response.get("Error", {})
            message = error.get("Message") or str(e)
            logger.error(f"Error al comparar rostros: {error.get('Code', 'ClientError')} - {message}")
            raise ComparisonError(message) from e
        except BotoCoreError as e:
            logger.error(f"Error al comparar rostros: {e}")
            raise ComparisonError(str(e)) from e
        except Exception as e:
            logger.error(f"Error al comparar rostros: {e}", exc_info=True)
            raise ComparisonError(str(e)) from e

        return self.parse_response(response)

    @staticmethod
    def parse_response(response: Dict[str, Any]) -> ComparisonResult:
        """
        Build a ComparisonResult from a CompareFaces response.

        Rekognition returns matches ordered by similarity, highest first.
        """
        face_matches = response.get("FaceMatches") or []
        if not face_matches:
            return ComparisonResult(matched=False, similarity=0.0)

        similarity = face_matches[0].get("Similarity") or 0.0
        return ComparisonResult(matched=True, similarity=float(similarity))
