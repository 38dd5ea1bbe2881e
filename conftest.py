import logging
from pathlib import Path

import cv2
import numpy as np
import pytest

from gopherize.config import bundled_cascade

logging.getLogger("gopherize").setLevel(logging.DEBUG)


@pytest.fixture
def frontal_cascade():
    path = bundled_cascade()
    assert path.is_file(), f"opencv-python does not ship {path.name}"
    return path


@pytest.fixture
def portrait():
    """Frontal head-and-shoulders photo shipped with matplotlib."""
    import matplotlib

    path = Path(matplotlib.get_data_path()) / "sample_data" / "grace_hopper.jpg"
    assert path.is_file(), f"matplotlib does not ship {path.name}"
    return path


@pytest.fixture
def gray_photo():
    """400x400 mid-grey BGR photo with no faces in it."""
    return np.full((400, 400, 3), 128, dtype=np.uint8)


@pytest.fixture
def red_square():
    """50x50 opaque red BGRA overlay."""
    img = np.zeros((50, 50, 4), dtype=np.uint8)
    img[:, :, 2] = 255
    img[:, :, 3] = 255
    return img


@pytest.fixture
def write_image(tmp_path):
    def _write(name, img):
        path = tmp_path / name
        assert cv2.imwrite(str(path), img)
        return path
    return _write
