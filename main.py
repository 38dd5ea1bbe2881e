"""Paste a gopher over every face found in a photo.

Faces are found with an OpenCV cascade classifier; the gopher image is
Lanczos-resized relative to each face width and drawn over the photo, and the
result is written as a JPEG.

Example:
  python main.py -classifier haarcascade_frontalface_default.xml \
    -photo team.jpg -gopher gopher.png -out team-gophers.jpg
"""

import sys

from gopherize.cli import main


if __name__ == "__main__":  # pragma: no cover (manual run)
  sys.exit(main())
