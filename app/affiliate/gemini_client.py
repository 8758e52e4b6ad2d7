# affiliate/gemini_client.py
# -----------------------------------------------------------------------------
# Shared google-genai plumbing for the script and render services:
#   * get_client_and_mode: Vertex AI first (if configured), public API as fallback
#   * text_part / image_part: build Part objects for multimodal contents
#   * build_user_contents: wrap parts into a single user Content
# -----------------------------------------------------------------------------
import logging
from typing import List, Tuple

from affiliate import config

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """A generation call failed; the message is meant to be shown to the user."""


# ============================================================================
# Client factory
# - Honors FORCE_GEMINI_PUBLIC when an API key exists.
# - Tries Vertex (cheap models.list() call to validate access), falls back to key.
# - Raises if nothing is configured.
# ============================================================================
def get_client_and_mode() -> Tuple[object, str]:
    from google import genai                         # Local import: only loaded when a call is made
    if config.FORCE_PUBLIC and config.GOOGLE_API_KEY:
        logger.info("Using public Gemini API (forced)")
        return genai.Client(api_key=config.GOOGLE_API_KEY), "public"

    if config.GCP_PROJECT:
        try:
            c = genai.Client(vertexai=True, project=config.GCP_PROJECT, location=config.GCP_LOCATION)
            _ = c.models.list()                      # Validates the API is enabled and permissions exist
            logger.info("Using Vertex AI (project=%s, location=%s)", config.GCP_PROJECT, config.GCP_LOCATION)
            return c, "vertex"
        except Exception:
            if config.GOOGLE_API_KEY:
                logger.warning("Vertex AI unavailable, falling back to public Gemini API", exc_info=True)
                return genai.Client(api_key=config.GOOGLE_API_KEY), "public"
            raise RuntimeError("Vertex AI failed and there is no GOOGLE_API_KEY to fall back to.")

    if config.GOOGLE_API_KEY:
        logger.info("Using public Gemini API")
        return genai.Client(api_key=config.GOOGLE_API_KEY), "public"

    raise RuntimeError("Configure GCP_PROJECT or GOOGLE_API_KEY.")


def text_part(text: str):
    from google.genai import types
    return types.Part.from_text(text=text)


def image_part(data: bytes, mime_type: str):
    from google.genai import types
    return types.Part.from_bytes(data=data, mime_type=mime_type)


def build_user_contents(parts: List[object]):
    """Single user turn holding every part in order."""
    from google.genai import types
    return [types.Content(role="user", parts=parts)]


def describe_error(error: Exception) -> str:
    """Message text for a wrapped error; falls back to the class name when empty."""
    return str(error) or error.__class__.__name__
