"""Constants shared across layers"""

from .notification_messages import NotificationMessages
from .actuator_paths import ActuatorPaths

__all__ = [
    "NotificationMessages",
    "ActuatorPaths",
]
