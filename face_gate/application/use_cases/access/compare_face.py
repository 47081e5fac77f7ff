# Standard library imports
import logging

# Local application imports
from .reference_image import ReferenceImageLoader
from ...dto.compare_dto import CompareRequest, CompareResponse
from ....domain.constants import NotificationMessages
from ....domain.exceptions import MissingImageError
from ....infrastructure.external.actuator_client import ActuatorClient
from ....infrastructure.external.rekognition_client import RekognitionComparisonClient
from ....infrastructure.messaging.rabbitmq_publisher import RabbitMQPublisher
from ....utils.background_tasks import spawn_detached
from ....utils.image import decode_base64_image

logger = logging.getLogger(__name__)


class CompareFaceUseCase:
    """Use case for checking a visitor's face and driving the door accordingly"""

    def __init__(
        self,
        comparison_client: RekognitionComparisonClient,
        actuator_client: ActuatorClient,
        publisher: RabbitMQPublisher,
        reference_loader: ReferenceImageLoader,
    ) -> None:
        self.comparison_client = comparison_client
        self.actuator_client = actuator_client
        self.publisher = publisher
        self.reference_loader = reference_loader

    async def execute(self, request: CompareRequest) -> CompareResponse:
        """
        Compare the submitted face with the reference and act on the result.

        A match opens the door, anything else sounds the alarm. Actuator
        commands run detached and the notification is best effort, so neither
        changes the returned result.

        Args:
            request: Comparison request with base64 image and notification token

        Returns:
            CompareResponse with match flag and similarity

        Raises:
            MissingImageError: If no image was sent
            InvalidImageError: If the image is not valid base64
            ComparisonError: If the reference image or the provider call fails
        """
        if not request.base64:
            raise MissingImageError()

        source_bytes = decode_base64_image(request.base64)
        reference_bytes = await self.reference_loader.load()

        result = await self.comparison_client.compare(source_bytes, reference_bytes)

        if result.matched:
            logger.info(f"Rostro válido (similitud {result.similarity:.2f}). Abriendo puerta...")
            spawn_detached(self.actuator_client.unlock(), name="actuator-unlock")
            await self.publisher.publish(request.token, NotificationMessages.DOOR_OPENED)
        else:
            logger.info("Rostro no reconocido. Activando alarma...")
            spawn_detached(self.actuator_client.sound_alarm(), name="actuator-alarm")
            await self.publisher.publish(request.token, NotificationMessages.ALARM_TRIGGERED)

        return CompareResponse(match=result.matched, similarity=result.similarity)
