# Standard library imports
import logging
from typing import Any, Optional

# External package imports
import httpx

# Local application imports
from .base_device_client import BaseDeviceClient
from ...domain.constants import ActuatorPaths

logger = logging.getLogger(__name__)


class ActuatorClient(BaseDeviceClient):
    """
    HTTP client for the door actuator (ESP32 controller).

    Commands are fire-and-forget from the workflow's point of view: every
    error is logged here and never raised.
    """

    async def unlock(self) -> Optional[Any]:
        """
        Ask the device to open the door.

        Returns:
            Parsed JSON response, or None if the call failed
        """
        data = await self._send_command(ActuatorPaths.UNLOCK, "abriendo la puerta")
        if data is not None:
            logger.info(f"Puerta abierta: {data}")
        return data

    async def sound_alarm(self) -> Optional[Any]:
        """
        Ask the device to sound the alarm.

        Returns:
            Parsed JSON response, or None if the call failed
        """
        data = await self._send_command(ActuatorPaths.ALARM, "activando la alarma")
        if data is not None:
            logger.info(f"Alarma activada: {data}")
        return data

    async def _send_command(self, path: str, action: str) -> Optional[Any]:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.post(
                url,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
            return response.json()

        except httpx.TimeoutException:
            logger.error(f"Error {action}: timeout calling {url}")
            return None
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Error {action}: HTTP {e.response.status_code} - {e.response.text}"
            )
            return None
        except ValueError as e:
            # Body was not JSON
            logger.error(f"Error {action}: invalid JSON response from {url}: {e}")
            return None
        except Exception as e:
            logger.error(f"Error {action}: {e}", exc_info=True)
            return None
