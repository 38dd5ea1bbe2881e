import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable

import cv2
import numpy as np

from .config import DEFAULT_SIZE_COEFF, DEFAULT_X_COEFF, DEFAULT_Y_COEFF
from .detectors.base import Rectangle
from .errors import CompositeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlacementParams:
    size_coeff: float = DEFAULT_SIZE_COEFF
    x_coeff: float = DEFAULT_X_COEFF
    y_coeff: float = DEFAULT_Y_COEFF


@dataclass(frozen=True)
class OverlayGeometry:
    size: int      # overlay width in pixels
    origin_x: int  # overlay top-left in composite coordinates
    origin_y: int


def overlay_geometry(rect: Rectangle, params: PlacementParams) -> OverlayGeometry:
    """Overlay width and top-left corner for one detected face.

    The width scales with the face width; the offsets scale with that width
    and are subtracted from the face's top-left corner.

    Non-finite results (inf or nan coefficients) give size 0, which
    ``composite`` skips.
    """
    skipped = OverlayGeometry(0, rect.min_x, rect.min_y)
    scaled = rect.width * params.size_coeff
    if not math.isfinite(scaled):
        return skipped
    size = round(scaled)
    x_shift = size * params.x_coeff
    y_shift = size * params.y_coeff
    if not (math.isfinite(x_shift) and math.isfinite(y_shift)):
        return skipped
    x_off = round(x_shift)
    y_off = round(y_shift)
    return OverlayGeometry(size, rect.min_x - x_off, rect.min_y - y_off)


def scaled_height(overlay: np.ndarray, width: int) -> int:
    h, w = overlay.shape[:2]
    return max(1, round(h * width / w))


def resize_overlay(overlay_bgra: np.ndarray, width: int) -> np.ndarray:
    """Lanczos-resize a BGRA overlay to ``width``, keeping its aspect ratio.

    Returns float32 premultiplied colour (0..255) with alpha in 0..1, ready
    for ``paste_over``.
    """
    height = scaled_height(overlay_bgra, width)
    layer = overlay_bgra.astype(np.float32)
    alpha = layer[:, :, 3:4] / 255.0
    layer[:, :, :3] *= alpha
    layer[:, :, 3:4] = alpha
    resized = cv2.resize(layer, (width, height), interpolation=cv2.INTER_LANCZOS4)
    # Lanczos lobes overshoot; pull samples back into a valid premultiplied range.
    resized[:, :, 3] = np.clip(resized[:, :, 3], 0.0, 1.0)
    resized[:, :, :3] = np.clip(resized[:, :, :3], 0.0, resized[:, :, 3:4] * 255.0)
    return resized


def paste_over(dst: np.ndarray, layer: np.ndarray, x: int, y: int) -> np.ndarray:
    """Blend a premultiplied layer onto ``dst`` in place with its corner at (x, y).

    Parts of the layer falling outside ``dst`` are clipped.
    """
    H, W = dst.shape[:2]
    h, w = layer.shape[:2]

    x1 = max(x, 0)
    y1 = max(y, 0)
    x2 = min(x + w, W)
    y2 = min(y + h, H)
    if x1 >= x2 or y1 >= y2:
        return dst

    crop = layer[y1 - y:y2 - y, x1 - x:x2 - x]
    alpha = crop[:, :, 3:4]
    roi = dst[y1:y2, x1:x2].astype(np.float32)
    out = crop[:, :, :3] + roi * (1.0 - alpha)
    dst[y1:y2, x1:x2] = np.clip(np.rint(out), 0, 255).astype(np.uint8)
    return dst


def composite(photo_bgr: np.ndarray, overlay_bgra: np.ndarray,
              rects: Iterable[Rectangle], params: PlacementParams) -> np.ndarray:
    """Return a copy of the photo with the overlay drawn over every rectangle.

    Rectangles whose overlay width is not positive, or whose overlay would
    land entirely outside the photo, are skipped. An overlay too large to
    resize raises CompositeError.
    """
    out = photo_bgr.copy()
    H, W = out.shape[:2]
    resized: Dict[int, np.ndarray] = {}
    for rect in rects:
        geom = overlay_geometry(rect, params)
        if geom.size <= 0:
            logger.debug("skipping %s: overlay width %d", rect, geom.size)
            continue
        try:
            height = scaled_height(overlay_bgra, geom.size)
            if (geom.origin_x >= W or geom.origin_y >= H
                    or geom.origin_x + geom.size <= 0 or geom.origin_y + height <= 0):
                logger.debug("skipping %s: overlay at %s is off the photo", rect, geom)
                continue
            if geom.size not in resized:
                resized[geom.size] = resize_overlay(overlay_bgra, geom.size)
        except (cv2.error, MemoryError, OverflowError) as exc:
            raise CompositeError(f"resize overlay to width {geom.size}: {exc}") from exc
        logger.debug("drawing overlay for %s at %s", rect, geom)
        paste_over(out, resized[geom.size], geom.origin_x, geom.origin_y)
    return out
