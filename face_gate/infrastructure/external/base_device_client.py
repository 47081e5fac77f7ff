# Standard library imports
import logging
from typing import Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class BaseDeviceClient:
    """
    Base class for clients of the embedded actuator device.

    Provides common initialization for base_url and the HTTP client.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize base device client.

        Args:
            base_url: Base URL of the device. If None, reads ESP32_IP from env.
            http_client: Client to send requests with. If None, the shared pooled client is used.
        """
        settings = get_settings()
        self.base_url = (base_url if base_url is not None else settings.esp32_ip).rstrip("/")
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            return get_shared_http_client()
        return self._http_client
