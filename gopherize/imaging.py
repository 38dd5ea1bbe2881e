"""Decode and encode pixel buffers with OpenCV's codecs.

Photos are 8-bit BGR arrays. Overlays are normalised to 8-bit BGRA so the
compositor can always rely on an alpha channel.
"""

import logging
from pathlib import Path

import cv2
import numpy as np

from .config import JPEG_QUALITY
from .errors import FileWriteError, ImageDecodeError, ImageEncodeError

logger = logging.getLogger(__name__)


def read_image(path, *, keep_alpha: bool = False, stage: str | None = None) -> np.ndarray:
    """Decode ``path`` into a pixel array; the format is sniffed from content.

    Missing files and non-image files both raise ImageDecodeError.
    """
    flags = cv2.IMREAD_UNCHANGED if keep_alpha else cv2.IMREAD_COLOR
    try:
        img = cv2.imread(str(path), flags)
    except cv2.error as exc:
        raise ImageDecodeError(f"decode image {path}: {exc}", stage) from exc
    if img is None or img.size == 0:
        raise ImageDecodeError(f"file {path} is probably not an image", stage)
    logger.debug("decoded %s: %s %s", path, img.shape, img.dtype)
    return img


def to_bgra(img: np.ndarray) -> np.ndarray:
    if img.dtype == np.uint16:
        img = (img >> 8).astype(np.uint8)
    elif img.dtype != np.uint8:
        img = np.clip(img.astype(np.float32) * 255.0, 0, 255).astype(np.uint8)
    if img.ndim == 3 and img.shape[2] == 1:
        img = img[:, :, 0]
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2BGRA)
    if img.shape[2] == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2BGRA)
    return img


def read_overlay(path, *, stage: str | None = None) -> np.ndarray:
    """Decode an overlay image keeping its transparency, as 8-bit BGRA."""
    return to_bgra(read_image(path, keep_alpha=True, stage=stage))


def encode_jpeg(img: np.ndarray, quality: int = JPEG_QUALITY) -> bytes:
    try:
        ok, buf = cv2.imencode(".jpg", img, [cv2.IMWRITE_JPEG_QUALITY, int(quality)])
    except cv2.error as exc:
        raise ImageEncodeError(f"encode jpeg image: {exc}") from exc
    if not ok:
        raise ImageEncodeError("encode jpeg image: encoder returned no data")
    return buf.tobytes()


def write_jpeg(path, img: np.ndarray, quality: int = JPEG_QUALITY) -> int:
    """Encode ``img`` as JPEG and write it to ``path``, returning the byte count.

    The whole image is encoded before the file is created, so an encoder
    failure never leaves a truncated file behind.
    """
    data = encode_jpeg(img, quality)
    target = Path(path)
    try:
        with open(target, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise FileWriteError(f"create file {target}: {exc}") from exc
    logger.debug("wrote %d bytes to %s", len(data), target)
    return len(data)
