"""Messaging infrastructure for access notifications"""

from .rabbitmq_publisher import ConnectionState, RabbitMQPublisher

__all__ = ["ConnectionState", "RabbitMQPublisher"]
