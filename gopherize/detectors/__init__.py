from .base import DetectionParams, Rectangle
from .cascade import CascadeFaceDetector, detect_faces

__all__ = ["DetectionParams", "Rectangle", "CascadeFaceDetector", "detect_faces"]
