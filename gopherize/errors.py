class GopherizeError(Exception):
    """Base error; ``stage`` names the step of the run that failed."""

    stage = "run"

    def __init__(self, message: str, stage: str | None = None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage

    def __str__(self):
        return f"{self.stage}: {super().__str__()}"


class MissingRequiredFlag(GopherizeError):
    stage = "parse flags"


class ClassifierLoadError(GopherizeError):
    stage = "detect face"


class FaceDetectionError(GopherizeError):
    stage = "detect face"


class ImageDecodeError(GopherizeError):
    stage = "read image"


class ImageEncodeError(GopherizeError):
    stage = "write output file"


class FileWriteError(GopherizeError):
    stage = "write output file"


class CompositeError(GopherizeError):
    stage = "composite"
