import logging
from dataclasses import dataclass, field
from pathlib import Path

from .compositor import PlacementParams, composite
from .config import DEFAULT_OUTPUT, JPEG_QUALITY
from .detectors import DetectionParams, detect_faces
from .imaging import read_image, read_overlay, write_jpeg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    classifier: Path
    photo: Path
    gopher: Path
    detection: DetectionParams = field(default_factory=DetectionParams)
    placement: PlacementParams = field(default_factory=PlacementParams)
    output: Path = Path(DEFAULT_OUTPUT)
    quality: int = JPEG_QUALITY


def run(cfg: RunConfig) -> int:
    """Detect faces, paste the gopher over each and write the JPEG.

    Returns the number of faces found. The first failure aborts the run.
    """
    logger.debug("detection params: %s", cfg.detection)
    logger.debug("placement params: %s", cfg.placement)

    logger.info("Detecting faces in %s", cfg.photo)
    rects = detect_faces(cfg.classifier, cfg.photo, cfg.detection)
    logger.info("Found %d face(s)", len(rects))

    photo = read_image(cfg.photo, stage="read photo image")
    gopher = read_overlay(cfg.gopher, stage="read gopher image")

    result = composite(photo, gopher, rects, cfg.placement)

    write_jpeg(cfg.output, result, cfg.quality)
    logger.info("Wrote %s (%dx%d)", cfg.output, result.shape[1], result.shape[0])
    return len(rects)
