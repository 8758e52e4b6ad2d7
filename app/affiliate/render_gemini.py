import logging

from affiliate import config
from affiliate.gemini_client import (
    GenerationError,
    build_user_contents,
    describe_error,
    get_client_and_mode,
    image_part,
    text_part,
)
from affiliate.uploads import ImagePart, from_base64

logger = logging.getLogger(__name__)


def extract_first_image(resp) -> ImagePart:
    """
    Returns the first inline image found in candidates[0].content.parts.
    The SDK normally hands back raw bytes; a base64 string is decoded as well.
    """
    candidates = getattr(resp, "candidates", None) or []
    content = getattr(candidates[0], "content", None) if candidates else None
    for part in (getattr(content, "parts", None) or []):
        inline = getattr(part, "inline_data", None)
        if inline is None or not inline.data:
            continue
        mime_type = inline.mime_type or "image/png"
        if isinstance(inline.data, str):
            return from_base64(inline.data, mime_type)
        return ImagePart(mime_type=mime_type, data=inline.data)
    raise ValueError("No image data found in the API response.")


def render_image(prompt: str, image: ImagePart) -> ImagePart:
    try:
        client, _ = get_client_and_mode()
        contents = build_user_contents([text_part(prompt), image_part(image.data, image.mime_type)])
        resp = client.models.generate_content(model=config.IMAGE_MODEL, contents=contents)
        return extract_first_image(resp)
    except Exception as e:
        logger.exception("Error calling Gemini API for image rendering")
        raise GenerationError(f"Failed to generate image: {describe_error(e)}") from e
