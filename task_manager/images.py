"""Avatar upload checks and normalization."""
import io
import logging
import re

from PIL import Image, ImageOps, UnidentifiedImageError

from .exceptions import ValidationError

logger = logging.getLogger(__name__)

MAX_AVATAR_BYTES = 1_000_000
# Pixel ceiling checked from the header, before any decoding
MAX_AVATAR_PIXELS = 50_000_000
AVATAR_SIZE = (250, 250)
ALLOWED_EXTENSIONS = re.compile(r"\.(jpg|jpeg|png)$", re.IGNORECASE)


def check_avatar_upload(filename: str, size: int) -> None:
    """Reject uploads that are too large or don't look like images."""
    if not filename or not ALLOWED_EXTENSIONS.search(filename):
        raise ValidationError("Please upload images only!")
    if size > MAX_AVATAR_BYTES:
        raise ValidationError("File too large")


def normalize_avatar(data: bytes) -> bytes:
    """Crop and resize an image to a 250x250 PNG."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            width, height = image.size
            if width * height > MAX_AVATAR_PIXELS:
                raise ValidationError("Image dimensions are too large")
            image.load()
            if image.mode not in ("RGB", "RGBA", "L", "LA", "P"):
                image = image.convert("RGBA")
            resized = ImageOps.fit(image, AVATAR_SIZE)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        logger.info("Rejected avatar upload: %s", e)
        raise ValidationError("Uploaded file is not a valid image")

    buffer = io.BytesIO()
    resized.save(buffer, format="PNG")
    return buffer.getvalue()
