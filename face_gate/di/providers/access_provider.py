from typing import TYPE_CHECKING
from ...application.use_cases.access.compare_face import CompareFaceUseCase
from ...application.use_cases.access.reference_image import ReferenceImageLoader
from ...infrastructure.external.actuator_client import ActuatorClient
from ...infrastructure.external.rekognition_client import RekognitionComparisonClient
from ...infrastructure.messaging.rabbitmq_publisher import RabbitMQPublisher

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AccessProvider:
    """Access use case provider - registers the face comparison workflow"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register access use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            CompareFaceUseCase,
            lambda: CompareFaceUseCase(
                comparison_client=container.get(RekognitionComparisonClient),
                actuator_client=container.get(ActuatorClient),
                publisher=container.get(RabbitMQPublisher),
                reference_loader=container.get(ReferenceImageLoader),
            )
        )
