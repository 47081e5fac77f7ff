"""Domain exceptions raised by the comparison workflow."""


class FaceGateError(Exception):
    """Base exception for face gate errors."""
    pass


class MissingImageError(FaceGateError, ValueError):
    """Raised when the request carries no base64 image."""

    def __init__(self, message: str = "Se requiere una imagen en base64") -> None:
        super().__init__(message)


class InvalidImageError(FaceGateError, ValueError):
    """Raised when the submitted image cannot be decoded."""
    pass


class ComparisonError(FaceGateError):
    """Raised when the face comparison provider call fails."""
    pass


class ReferenceImageError(ComparisonError):
    """Raised when the stored reference image cannot be read."""
    pass
