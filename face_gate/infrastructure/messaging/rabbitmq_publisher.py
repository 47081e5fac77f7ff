"""RabbitMQ Publisher for Access Notifications

Publishes access notifications to a durable RabbitMQ queue for downstream
delivery. Owns the broker connection and keeps reconnecting on a fixed delay.
"""

import asyncio
import json
import logging
from enum import Enum
from typing import Any, Optional

import aio_pika
from aio_pika.abc import AbstractChannel, AbstractConnection

from ...core.config import get_settings
from ...domain.models import NotificationMessage

logger = logging.getLogger(__name__)


class ConnectionState(str, Enum):
    """Lifecycle of the broker link"""
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    READY = "ready"


class RabbitMQPublisher:
    """
    Publisher for access notifications.

    Single owner of the broker connection and channel. publish() never raises
    and never waits for the connection: when the link is down the message is
    dropped and logged.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        queue_name: Optional[str] = None,
        reconnect_delay: Optional[float] = None,
    ):
        """
        Initialize RabbitMQ publisher.

        Args:
            url: Broker URL (amqp://...). If None, reads RABBITMQ_URL from env.
            queue_name: Durable queue to publish to. If None, reads NOTIFICATION_QUEUE from env.
            reconnect_delay: Seconds between connection attempts.
        """
        settings = get_settings()
        self.url = url if url is not None else settings.rabbitmq_url
        self.queue_name = queue_name if queue_name is not None else settings.notification_queue
        self.reconnect_delay = (
            reconnect_delay if reconnect_delay is not None else settings.rabbitmq_reconnect_delay
        )

        self._state = ConnectionState.DISCONNECTED
        self._connection: Optional[AbstractConnection] = None
        self._channel: Optional[AbstractChannel] = None
        self._reconnect_task: Optional["asyncio.Task[None]"] = None
        self._closing = False

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is ConnectionState.READY

    def start(self) -> None:
        """
        Start connecting in the background.

        Returns immediately; the connection becomes READY whenever the broker
        accepts it.
        """
        if self._reconnect_task and not self._reconnect_task.done():
            logger.warning("El publicador RabbitMQ ya se está conectando")
            return

        self._closing = False
        self._reconnect_task = asyncio.create_task(self.connect(), name="rabbitmq-connect")

    async def connect(self) -> bool:
        """
        Open the connection, a channel, and declare the durable queue.

        On failure the error is logged and another attempt is scheduled after
        reconnect_delay seconds. Never raises.

        Returns:
            True if the publisher is READY after this attempt
        """
        if self._closing:
            return False

        self._state = ConnectionState.CONNECTING
        connection: Optional[AbstractConnection] = None
        try:
            connection = await aio_pika.connect(self.url)
            channel = await connection.channel(publisher_confirms=False)
            await channel.declare_queue(self.queue_name, durable=True)
        except asyncio.CancelledError:
            self._state = ConnectionState.DISCONNECTED
            await self._discard_connection(connection)
            raise
        except Exception as e:
            logger.error(f"Error conectando a RabbitMQ: {e}")
            self._state = ConnectionState.DISCONNECTED
            await self._discard_connection(connection)
            self._schedule_reconnect()
            return False

        self._connection = connection
        self._channel = channel
        connection.close_callbacks.add(self._on_connection_closed)
        self._state = ConnectionState.READY
        logger.info(f'Conexión a RabbitMQ establecida - Cola "{self.queue_name}" lista')
        return True

    async def publish(self, token: Optional[str], message: str) -> bool:
        """
        Publish a notification to the queue.

        Args:
            token: Client notification token, forwarded unmodified
            message: Notification text

        Returns:
            True if handed to the broker, False if dropped
        """
        notification = NotificationMessage(token=token, message=message)

        if not self.is_ready or self._channel is None:
            logger.error("Canal RabbitMQ no disponible")
            return False

        try:
            body = json.dumps(notification.to_payload()).encode("utf-8")
            await self._channel.default_exchange.publish(
                aio_pika.Message(
                    body=body,
                    content_type="application/json",
                    delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
                ),
                routing_key=self.queue_name,
            )
        except Exception as e:
            logger.error(f"Error publicando notificación en RabbitMQ: {e}", exc_info=True)
            return False

        logger.info(f"Notificación enviada a RabbitMQ: {notification.to_payload()}")
        return True

    async def close(self) -> None:
        """
        Stop reconnecting and close the channel and connection if open.
        """
        self._closing = True

        task = self._reconnect_task
        self._reconnect_task = None
        if task and not task.done() and task is not asyncio.current_task():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

        channel, connection = self._channel, self._connection
        self._channel = None
        self._connection = None
        self._state = ConnectionState.DISCONNECTED

        if channel is not None:
            try:
                await channel.close()
            except Exception as e:
                logger.error(f"Error cerrando el canal RabbitMQ: {e}")
        if connection is not None:
            try:
                await connection.close()
            except Exception as e:
                logger.error(f"Error cerrando la conexión RabbitMQ: {e}")

        logger.info("Publicador RabbitMQ cerrado")

    async def _discard_connection(self, connection: Optional[AbstractConnection]) -> None:
        """Close a connection left half-open by a failed connect attempt."""
        if connection is None:
            return
        try:
            await connection.close()
        except Exception as e:
            logger.error(f"Error cerrando la conexión RabbitMQ fallida: {e}")

    def _schedule_reconnect(self) -> None:
        if self._closing:
            return
        logger.info(f"Reintentando conexión a RabbitMQ en {self.reconnect_delay}s")
        self._reconnect_task = asyncio.create_task(
            self._reconnect_after_delay(), name="rabbitmq-reconnect"
        )

    async def _reconnect_after_delay(self) -> None:
        await asyncio.sleep(self.reconnect_delay)
        await self.connect()

    def _on_connection_closed(self, sender: Any, exc: Optional[BaseException] = None) -> None:
        if self._closing:
            return
        logger.error(f"Conexión a RabbitMQ perdida: {exc}")
        self._channel = None
        self._connection = None
        self._state = ConnectionState.DISCONNECTED
        self._schedule_reconnect()
