import base64
from dataclasses import dataclass
from io import BytesIO
from typing import Optional

from PIL import Image, UnidentifiedImageError

# Pillow format name -> MIME type for the formats the uploader accepts
_FORMAT_MIME = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
    "WEBP": "image/webp",
    "GIF": "image/gif",
}
_MIME_EXT = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
    "image/gif": "gif",
}


class InvalidImageError(ValueError):
    pass


@dataclass(frozen=True)
class ImagePart:
    """Raw image bytes plus MIME type, as sent to (or received from) Gemini."""
    mime_type: str
    data: bytes

    @property
    def extension(self) -> str:
        return _MIME_EXT.get(self.mime_type, "png")


def guess_mime(data: bytes) -> str:
    """Infer the MIME type from the bytes with Pillow; raises InvalidImageError if unreadable."""
    try:
        with Image.open(BytesIO(data)) as img:
            fmt = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise InvalidImageError("The uploaded file is not a valid image.") from e
    return _FORMAT_MIME.get(fmt or "", "image/jpeg")


def to_image_part(data: bytes, declared_type: Optional[str] = None) -> ImagePart:
    """
    Build an ImagePart from uploaded bytes.
    The bytes are always checked with Pillow; the browser-declared type wins when it is an image/* type.
    """
    if not data:
        raise InvalidImageError("The uploaded file is empty.")
    sniffed = guess_mime(data)
    mime = declared_type if (declared_type or "").startswith("image/") else sniffed
    return ImagePart(mime_type=mime, data=data)


def from_upload(file) -> Optional[ImagePart]:
    """Streamlit UploadedFile (or anything with read()/type) -> ImagePart; None passes through."""
    if file is None:
        return None
    file.seek(0)
    return to_image_part(file.read(), getattr(file, "type", None))


def from_base64(b64: str, mime_type: str = "image/png") -> ImagePart:
    """Inline payloads that arrive as base64 text instead of raw bytes."""
    return ImagePart(mime_type=mime_type, data=base64.b64decode(b64))

