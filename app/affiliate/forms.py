from dataclasses import dataclass
from typing import Optional

from affiliate import config
from affiliate.uploads import ImagePart

DETAIL_TEXT = "text"
DETAIL_PHOTO = "photo"

MSG_NO_MAIN_IMAGE = "Please upload a main product photo."
MSG_NO_DETAIL_TEXT = "Please provide product details in text or upload a detail photo."
MSG_NO_DETAIL_PHOTO = "Please upload a detail photo or switch to text input."
MSG_RENDER_INCOMPLETE = "Please ensure a photo is uploaded and provide a rendering prompt."


@dataclass
class ScriptForm:
    main_image: Optional[ImagePart] = None
    detail_mode: str = DETAIL_TEXT
    product_details: str = ""
    detail_image: Optional[ImagePart] = None
    target_audience: str = ""
    other_details: str = ""
    duration: int = config.DURATION_DEFAULT
    number_of_scripts: int = config.SCRIPTS_DEFAULT

    def request_kwargs(self) -> dict:
        """
        Arguments for generate_scripts. Typed details are always sent;
        the detail photo only in photo mode.
        """
        text_mode = self.detail_mode == DETAIL_TEXT
        return dict(
            product_details=self.product_details.strip(),
            target_audience=self.target_audience.strip(),
            other_details=self.other_details.strip(),
            duration=_clamp(int(self.duration), config.DURATION_MIN, config.DURATION_MAX),
            main_image=self.main_image,
            detail_image=None if text_mode else self.detail_image,
            number_of_scripts=_clamp(int(self.number_of_scripts), config.SCRIPTS_MIN, config.SCRIPTS_MAX),
        )


@dataclass
class RenderForm:
    main_image: Optional[ImagePart] = None
    prompt: str = ""


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def validate_script_form(form: ScriptForm) -> Optional[str]:
    """First failing rule's message, or None when the form can be submitted."""
    if form.main_image is None:
        return MSG_NO_MAIN_IMAGE
    if form.detail_mode == DETAIL_TEXT and not form.product_details.strip():
        return MSG_NO_DETAIL_TEXT
    if form.detail_mode == DETAIL_PHOTO and form.detail_image is None:
        return MSG_NO_DETAIL_PHOTO
    return None


def can_generate_script(form: ScriptForm) -> bool:
    return validate_script_form(form) is None


def validate_render_form(form: RenderForm) -> Optional[str]:
    # Whitespace-only prompts count as empty
    if form.main_image is None or not form.prompt.strip():
        return MSG_RENDER_INCOMPLETE
    return None


def can_render(form: RenderForm) -> bool:
    return validate_render_form(form) is None
