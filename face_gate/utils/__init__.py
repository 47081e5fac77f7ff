"""Utility modules for the face gate application."""

from .background_tasks import spawn_detached, wait_for_pending
from .image import decode_base64_image

__all__ = [
    "spawn_detached",
    "wait_for_pending",
    "decode_base64_image",
]
