import os
from io import BytesIO
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from PIL import Image

# Keep tests independent from a developer's .env
os.environ.setdefault("GOOGLE_API_KEY", "test_key")

from affiliate.uploads import ImagePart  # noqa: E402


def _image_bytes(fmt: str, color=(200, 30, 30)) -> bytes:
    bio = BytesIO()
    Image.new("RGB", (8, 8), color).save(bio, format=fmt)
    return bio.getvalue()


@pytest.fixture
def png_bytes():
    return _image_bytes("PNG")


@pytest.fixture
def jpeg_bytes():
    return _image_bytes("JPEG", (10, 120, 10))


@pytest.fixture
def main_image(png_bytes):
    return ImagePart(mime_type="image/png", data=png_bytes)


@pytest.fixture
def detail_image(jpeg_bytes):
    return ImagePart(mime_type="image/jpeg", data=jpeg_bytes)


@pytest.fixture
def mock_client(mocker):
    """
    Patches the client factory used by both services.
    Returns the fake client; set client.models.generate_content.return_value per test.
    """
    client = MagicMock()
    mocker.patch("affiliate.script_gemini.get_client_and_mode", return_value=(client, "public"))
    mocker.patch("affiliate.render_gemini.get_client_and_mode", return_value=(client, "public"))
    return client


def text_response(text):
    return SimpleNamespace(text=text)


def image_response(*parts):
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))])


def inline_part(data, mime_type="image/png"):
    return SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type))


def plain_text_part(text):
    return SimpleNamespace(text=text, inline_data=None)
