# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from .api.middleware import BodySizeLimitMiddleware
from .api.v1 import compare_router, health_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import get_container
from .infrastructure.http_client_factory import close_shared_http_client
from .infrastructure.messaging import RabbitMQPublisher
from .utils.background_tasks import wait_for_pending

logger = logging.getLogger(__name__)

# Grace period for detached actuator calls at shutdown
SHUTDOWN_TASK_TIMEOUT = 5.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Starts the RabbitMQ publisher's connect loop without waiting for it, and on
    shutdown closes the broker link and the shared HTTP client.
    """
    settings = get_settings()
    missing = settings.missing_required()
    if missing:
        logger.warning(
            f"Configuración faltante: {', '.join(missing)}. "
            f"Las llamadas relacionadas fallarán hasta que se definan."
        )

    publisher = get_container().get(RabbitMQPublisher)
    publisher.start()
    logger.info(f"Servidor corriendo en http://localhost:{settings.port}")

    yield

    logger.info("Deteniendo servidor...")
    try:
        await publisher.close()
    except Exception as e:
        logger.error(f"Error cerrando el publicador RabbitMQ: {e}", exc_info=True)

    await wait_for_pending(timeout=SHUTDOWN_TASK_TIMEOUT)
    await close_shared_http_client()

    logger.info("Servidor detenido")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON bodies are client errors, reported in the same shape as a missing image."""
    logger.warning(f"Cuerpo inválido en {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Cuerpo de la petición inválido"},
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Request body size ceiling
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()

    application = FastAPI(
        title="Face Gate API",
        version="1.0.0",
        description="Face comparison door access service",
        lifespan=lifespan
    )

    application.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)
    application.add_exception_handler(RequestValidationError, request_validation_handler)

    application.include_router(compare_router)
    application.include_router(health_router)

    return application


# Create application instance
app = create_application()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
