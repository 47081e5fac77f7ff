from .access import (
    CompareFaceUseCase,
    ReferenceImageLoader,
)

__all__ = [
    "CompareFaceUseCase",
    "ReferenceImageLoader",
]
