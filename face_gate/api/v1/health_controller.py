# External package imports
from fastapi import APIRouter

# Local application imports
from ...di.container import get_container
from ...infrastructure.messaging.rabbitmq_publisher import RabbitMQPublisher


router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """Liveness check, reports the broker link state"""
    publisher = get_container().get(RabbitMQPublisher)
    return {"status": "ok", "queue": publisher.state.value}
