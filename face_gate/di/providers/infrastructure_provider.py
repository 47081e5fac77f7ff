from typing import TYPE_CHECKING
from ...application.use_cases.access.reference_image import ReferenceImageLoader
from ...infrastructure.external.actuator_client import ActuatorClient
from ...infrastructure.external.rekognition_client import RekognitionComparisonClient
from ...infrastructure.messaging.rabbitmq_publisher import RabbitMQPublisher

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class InfrastructureProvider:
    """Registers the external collaborators as process-wide singletons"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register broker publisher, comparison gateway, actuator client and reference loader.
        The publisher is the single owner of the broker connection.
        """
        container.register_singleton(RabbitMQPublisher, RabbitMQPublisher())
        container.register_singleton(RekognitionComparisonClient, RekognitionComparisonClient())
        container.register_singleton(ActuatorClient, ActuatorClient())
        container.register_singleton(ReferenceImageLoader, ReferenceImageLoader())
