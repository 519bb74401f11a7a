"""Format and size checks for uploaded image data URLs."""

from pydantic import BaseModel

from heritagelens.config import MAX_IMAGE_BYTES
from heritagelens.exceptions import (
    ImageTooLargeError,
    ImageValidationError,
    InvalidImageFormatError,
)

DATA_URL_PREFIX = "data:image/"


class ImageValidation(BaseModel):
    valid: bool
    error: str | None = None


def extract_payload(image: str) -> str:
    """Return the encoded payload after the first comma of a data URL."""
    _, sep, payload = image.partition(",")
    return payload if sep else image[len(DATA_URL_PREFIX):]


def extract_mime_type(image: str) -> str:
    """Return the mime type declared in a data URL, e.g. ``image/png``."""
    header = image.split(",", 1)[0]
    mime_type = header[len("data:"):].split(";", 1)[0]
    return mime_type or "image/jpeg"


def estimated_size(payload: str) -> float:
    return len(payload) * 3 / 4


def validate_image(image: str | None, max_bytes: int = MAX_IMAGE_BYTES) -> str:
    """Check an image data URL and return its payload.

    Raises InvalidImageFormatError when the string is empty or is not a
    ``data:image/`` URL, and ImageTooLargeError when the decoded size
    estimate exceeds ``max_bytes``.
    """
    if not image:
        raise InvalidImageFormatError("No image provided")
    if not image.startswith(DATA_URL_PREFIX):
        raise InvalidImageFormatError("Invalid image format")

    payload = extract_payload(image)
    if estimated_size(payload) > max_bytes:
        raise ImageTooLargeError("Image file too large")
    return payload


def check_image(image: str | None, max_bytes: int = MAX_IMAGE_BYTES) -> ImageValidation:
    try:
        validate_image(image, max_bytes)
    except ImageValidationError as e:
        return ImageValidation(valid=False, error=str(e))
    return ImageValidation(valid=True)
