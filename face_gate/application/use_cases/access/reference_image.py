# Standard library imports
import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

# Local application imports
from ....core.config import get_settings
from ....domain.exceptions import ReferenceImageError

logger = logging.getLogger(__name__)


class ReferenceImageLoader:
    """Reads the enrolled reference photo from local storage on every call."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        settings = get_settings()
        self.path = Path(path if path is not None else settings.reference_image_path)

    async def load(self) -> bytes:
        """
        Read the reference image.

        Returns:
            Raw image bytes

        Raises:
            ReferenceImageError: If the file is missing or unreadable
        """
        try:
            return await asyncio.to_thread(self.path.read_bytes)
        except OSError as e:
            logger.error(f"Cannot read reference image {self.path}: {e}")
            raise ReferenceImageError(f"No se pudo leer la imagen de referencia: {self.path}") from e
