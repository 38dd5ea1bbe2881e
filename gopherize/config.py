from pathlib import Path
import cv2

# Face detection defaults
DEFAULT_SCALE = 1.1
DEFAULT_MIN_NEIGHBOURS = 8
DEFAULT_MIN_SIZE = 200
DEFAULT_MAX_SIZE = 800

# Gopher placement defaults
DEFAULT_SIZE_COEFF = 3.0
DEFAULT_X_COEFF = 0.0
DEFAULT_Y_COEFF = 0.0

# Output
DEFAULT_OUTPUT = "output.jpg"
JPEG_QUALITY = 75

LOG_FORMAT = "[%(levelname)s] %(message)s"

FRONTAL_FACE_CASCADE = "haarcascade_frontalface_default.xml"


def bundled_cascade(name: str = FRONTAL_FACE_CASCADE) -> Path:
    """Path of a cascade file shipped with opencv-python."""
    return Path(cv2.data.haarcascades) / name
