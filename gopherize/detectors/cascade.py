import logging
from pathlib import Path
from typing import List

import cv2

from .base import DetectionParams, Rectangle
from ..errors import ClassifierLoadError, FaceDetectionError
from ..imaging import read_image

logger = logging.getLogger(__name__)


class CascadeFaceDetector:
    """Haar/LBP cascade loaded from an XML definition.

    Use as a context manager so the classifier is dropped on every exit path.
    """

    def __init__(self, classifier_path):
        path = Path(classifier_path)
        if not path.is_file():
            raise ClassifierLoadError(f"failed to read classifier file {path}: no such file")
        cascade = cv2.CascadeClassifier()
        try:
            loaded = cascade.load(str(path))
        except cv2.error as exc:
            raise ClassifierLoadError(f"failed to read classifier file {path}: {exc}") from exc
        if not loaded or cascade.empty():
            raise ClassifierLoadError(f"failed to read classifier file {path}")
        self.path = path
        self.cascade = cascade

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def close(self):
        self.cascade = None

    def detect(self, image_bgr, params: DetectionParams) -> List[Rectangle]:
        if self.cascade is None:
            raise FaceDetectionError("classifier already closed")
        if image_bgr.ndim == 3:
            gray = cv2.cvtColor(image_bgr, cv2.COLOR_BGR2GRAY)
        else:
            gray = image_bgr
        try:
            raw = self.cascade.detectMultiScale(
                gray,
                scaleFactor=params.scale,
                minNeighbors=params.min_neighbours,
                flags=0,
                minSize=(params.min_size, params.min_size),
                maxSize=(params.max_size, params.max_size),
            )
        except cv2.error as exc:
            raise FaceDetectionError(f"detectMultiScale rejected {params}: {exc}") from exc
        return [Rectangle.from_xywh(box) for box in raw]


def detect_faces(classifier_path, photo_path, params: DetectionParams) -> List[Rectangle]:
    """Load the classifier, decode the photo and return the face rectangles found."""
    with CascadeFaceDetector(classifier_path) as detector:
        photo = read_image(photo_path, stage="detect face")
        rects = detector.detect(photo, params)
    logger.debug("detected %d face(s) with %s", len(rects), params)
    return rects
