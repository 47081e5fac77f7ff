"""External service clients for communicating with external systems"""

from .actuator_client import ActuatorClient
from .rekognition_client import RekognitionComparisonClient

__all__ = [
    "ActuatorClient",
    "RekognitionComparisonClient",
]
