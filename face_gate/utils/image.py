"""Image payload utilities.

Decoding of base64 image payloads submitted by clients. No image
preprocessing happens here; the comparison provider receives the raw bytes.
"""

import base64
import binascii

from ..domain.exceptions import InvalidImageError


def strip_data_url_prefix(base64_string: str) -> str:
    """Remove a "data:image/...;base64," prefix if present."""
    if ";base64," in base64_string:
        return base64_string.split(";base64,", 1)[1]
    return base64_string


def decode_base64_image(base64_string: str) -> bytes:
    """Decode a base64 string to raw image bytes.

    Args:
        base64_string: Base64 encoded image, optionally with data URL prefix.
            Example formats:
            - "data:image/jpeg;base64,/9j/4AAQSkZ..."
            - "/9j/4AAQSkZ..." (without prefix)

    Returns:
        Decoded image bytes.

    Raises:
        InvalidImageError: If the string is not valid base64 or decodes to nothing.
    """
    payload = "".join(strip_data_url_prefix(base64_string).split())
    # Tolerate missing padding, clients often trim it
    payload += "=" * (-len(payload) % 4)

    try:
        image_bytes = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError(f"Imagen base64 inválida: {e}")

    if not image_bytes:
        raise InvalidImageError("Imagen base64 vacía")

    return image_bytes
