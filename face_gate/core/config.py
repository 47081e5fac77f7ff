# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    Broker, device and cloud credentials have no usable defaults; when they are
    missing the failure shows up on first use (connection or call error).
    """

    def __init__(self) -> None:
        # RabbitMQ Configuration
        self.rabbitmq_url: Final[str] = os.getenv("RABBITMQ_URL", "")
        self.notification_queue: Final[str] = os.getenv("NOTIFICATION_QUEUE", "")
        self.rabbitmq_reconnect_delay: Final[float] = float(
            os.getenv("RABBITMQ_RECONNECT_DELAY", "5.0")
        )

        # Actuator (ESP32) Configuration
        self.esp32_ip: Final[str] = os.getenv("ESP32_IP", "")
        self.actuator_timeout: Final[float] = float(os.getenv("ACTUATOR_TIMEOUT", "10.0"))

        # AWS Rekognition Configuration
        self.aws_access_key_id: Final[Optional[str]] = os.getenv("AWS_ACCESS_KEY_ID")
        self.aws_secret_access_key: Final[Optional[str]] = os.getenv("AWS_SECRET_ACCESS_KEY")
        self.aws_session_token: Final[Optional[str]] = os.getenv("AWS_SESSION_TOKEN")
        self.aws_region: Final[str] = os.getenv("AWS_REGION", "us-east-1")
        self.similarity_threshold: Final[float] = float(
            os.getenv("SIMILARITY_THRESHOLD", "80")
        )

        # Reference image (single enrolled face)
        self.reference_image_path: Final[str] = os.getenv("REFERENCE_IMAGE_PATH", "target.jpg")

        # HTTP Server Configuration
        self.port: Final[int] = int(os.getenv("PORT", "3200"))
        self.max_body_bytes: Final[int] = int(
            os.getenv("MAX_BODY_BYTES", str(10 * 1024 * 1024))
        )
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

    def missing_required(self) -> List[str]:
        """
        List required environment variables that are not set.

        Returns:
            Names of the missing variables (empty list when fully configured)
        """
        required = {
            "RABBITMQ_URL": self.rabbitmq_url,
            "NOTIFICATION_QUEUE": self.notification_queue,
            "ESP32_IP": self.esp32_ip,
            "AWS_ACCESS_KEY_ID": self.aws_access_key_id,
            "AWS_SECRET_ACCESS_KEY": self.aws_secret_access_key,
            "AWS_SESSION_TOKEN": self.aws_session_token,
        }
        return [name for name, value in required.items() if not value]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
