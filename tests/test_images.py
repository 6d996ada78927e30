import io

import pytest
from PIL import Image

from task_manager.exceptions import ValidationError
from task_manager.images import check_avatar_upload, normalize_avatar

from util import make_image


def test_check_avatar_upload_accepts_images():
    for name in ("me.jpg", "me.jpeg", "me.png", "ME.PNG"):
        check_avatar_upload(name, 1000)
    check_avatar_upload("me.png", 1_000_000)


def test_check_avatar_upload_rejects():
    with pytest.raises(ValidationError, match="images only"):
        check_avatar_upload("me.gif", 10)
    with pytest.raises(ValidationError, match="images only"):
        check_avatar_upload("png", 10)
    with pytest.raises(ValidationError, match="too large"):
        check_avatar_upload("me.png", 1_000_001)


def test_normalize_avatar_outputs_square_png():
    data = normalize_avatar(make_image(size=(800, 300), fmt="JPEG"))
    with Image.open(io.BytesIO(data)) as image:
        assert image.format == "PNG"
        assert image.size == (250, 250)


def test_normalize_avatar_rejects_garbage():
    with pytest.raises(ValidationError):
        normalize_avatar(b"\x89PNG but not really")


def test_normalize_avatar_rejects_oversized_dimensions():
    with pytest.raises(ValidationError, match="dimensions"):
        normalize_avatar(make_image(size=(8000, 8000), mode="1"))
