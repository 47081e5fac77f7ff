from .compare_face import CompareFaceUseCase
from .reference_image import ReferenceImageLoader

__all__ = ["CompareFaceUseCase", "ReferenceImageLoader"]
