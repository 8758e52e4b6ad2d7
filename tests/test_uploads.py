import base64
from io import BytesIO

import pytest
from PIL import Image

from affiliate import config
from affiliate.uploads import ImagePart, InvalidImageError, from_base64, from_upload, guess_mime, to_image_part


class FakeUpload(BytesIO):
    """Mimics streamlit's UploadedFile: a BytesIO with a declared MIME type."""

    def __init__(self, data: bytes, type: str):
        super().__init__(data)
        self.type = type


def test_guess_mime_png_and_jpeg(png_bytes, jpeg_bytes):
    assert guess_mime(png_bytes) == "image/png"
    assert guess_mime(jpeg_bytes) == "image/jpeg"


def test_guess_mime_rejects_non_images():
    with pytest.raises(InvalidImageError, match="not a valid image"):
        guess_mime(b"definitely not an image")


def test_to_image_part_prefers_declared_image_type(png_bytes):
    assert to_image_part(png_bytes, "image/x-custom").mime_type == "image/x-custom"


def test_to_image_part_sniffs_when_declared_type_is_missing(jpeg_bytes):
    assert to_image_part(jpeg_bytes, "application/octet-stream").mime_type == "image/jpeg"
    assert to_image_part(jpeg_bytes).mime_type == "image/jpeg"


def test_to_image_part_rejects_empty():
    with pytest.raises(InvalidImageError, match="empty"):
        to_image_part(b"")


def test_from_upload_reads_from_start(png_bytes):
    up = FakeUpload(png_bytes, "image/png")
    up.read()                                  # already consumed once (e.g. by a preview)
    part = from_upload(up)
    assert part.data == png_bytes
    assert part.mime_type == "image/png"


def test_from_upload_none():
    assert from_upload(None) is None


def test_image_part_extension():
    assert ImagePart(mime_type="image/jpeg", data=b"x").extension == "jpg"
    assert ImagePart(mime_type="image/gif", data=b"x").extension == "gif"
    assert ImagePart(mime_type="image/x-unknown", data=b"x").extension == "png"


def test_gif_uploads_are_accepted():
    bio = BytesIO()
    Image.new("P", (4, 4)).save(bio, format="GIF")
    assert "gif" in config.UPLOAD_TYPES
    assert to_image_part(bio.getvalue()).mime_type == "image/gif"


def test_from_base64_keeps_given_mime_type():
    part = from_base64(base64.b64encode(b"xyz").decode(), "image/webp")
    assert part.mime_type == "image/webp"
    assert part.data == b"xyz"


def test_from_base64_defaults_to_png():
    part = from_base64(base64.b64encode(b"xyz").decode())
    assert part.mime_type == "image/png"
    assert part.extension == "png"
