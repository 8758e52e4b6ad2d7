import logging
from typing import List, Optional

from affiliate import config
from affiliate.gemini_client import (
    GenerationError,
    build_user_contents,
    describe_error,
    get_client_and_mode,
    image_part,
    text_part,
)
from affiliate.uploads import ImagePart

logger = logging.getLogger(__name__)

SCRIPT_SEPARATOR = "---SCRIPT-SEPARATOR---"


# ============================================================================
# System instruction (4P structure, relaxed Indonesian, hard prohibitions)
# ============================================================================
def build_system_instruction(number_of_scripts: int, duration: int) -> str:
    return f"""
You are a professional affiliate video script generator called MESIN PEMBANGKIT SKRIP VIDEO AFFILIATE. Your task is to transform product photos and/or details into a ready-to-use video script. The script must be natural, not stiff, and not sound like an AI or a formal ad.

MANDATORY SCRIPT STRUCTURE (THE 4Ps):
1.  PERTANYAAN (Question): Start with a question that touches the potential buyer's problem, sparks curiosity, and feels relevant.
2.  PERNYATAAN (Statement): Follow up with a statement that describes the user's problem, making them feel "this is so me."
3.  PERINTAH (Command): Add a subtle command that guides and convinces without being pushy.
4.  PENGALAMAN (Experience): Narrate a usage experience as if you have actually used the product. It must be rational and not exaggerated or hyperbolic.

LANGUAGE RULES:
- Use a relaxed, everyday tone (Bahasa Santai).
- Do not use formal or standard language (Tidak formal, Tidak baku).
- The language should not sound like a brochure.

STRICT PROHIBITIONS - NEVER WRITE:
- "Sebagai AI"
- "Dalam video ini"
- "Kesimpulannya"
- AI technical jargon
- Stiff, report-like sentences.

INPUT HANDLING:
- You will receive a main product photo.
- You might also receive product details in the form of a second photo (e.g., a label, instructions) or text.
- Base the script on ALL available information. If only photos are provided, determine the product's function from the visuals using common sense. Do not invent extreme benefits.

OUTPUT FORMAT:
- Generate exactly {number_of_scripts} unique script(s).
- The final output must be ONLY the video script narratives.
- You MUST separate each script with a unique delimiter: '{SCRIPT_SEPARATOR}'. Do not add any other text before the first script or after the last script.
- No headings (like "PERTANYAAN:").
- No bullet points.
- No technical formatting.
- No extra explanations.
- Each script should be suitable for a video duration of approximately {duration} seconds.
""".strip()


def build_user_prompt(product_details: str, target_audience: str, other_details: str,
                      number_of_scripts: int, has_detail_image: bool) -> str:
    if product_details:
        details = product_details
    elif has_detail_image:
        details = "[Analyze the second image provided for details]"
    else:
        details = "No text details provided."
    return (
        "Main Product Photo: [Analyze the first image provided]\n"
        f"Product Details: {details}\n"
        f"Target Audience: {target_audience or 'General audience.'}\n"
        f"Other Details: {other_details or 'None.'}\n"
        "\n"
        f"Generate {number_of_scripts} unique script variation(s) based on all these details."
    )


def build_contents(user_prompt: str, main_image: ImagePart, detail_image: Optional[ImagePart] = None):
    """Prompt first, then the main photo, then the optional detail photo."""
    parts = [text_part(user_prompt), image_part(main_image.data, main_image.mime_type)]
    if detail_image is not None:
        parts.append(image_part(detail_image.data, detail_image.mime_type))
    return build_user_contents(parts)


def split_scripts(text: Optional[str], limit: Optional[int] = None) -> List[str]:
    """Split on the literal separator, trim, drop empties; keep at most `limit` when given."""
    scripts = [s.strip() for s in (text or "").split(SCRIPT_SEPARATOR)]
    scripts = [s for s in scripts if s]
    if limit is not None and len(scripts) > limit:
        logger.warning("Model returned %d scripts, keeping the first %d", len(scripts), limit)
        scripts = scripts[:limit]
    return scripts


# ============================================================================
# Main entry point: one request, no retry
# ============================================================================
def generate_scripts(product_details: str, target_audience: str, other_details: str,
                     duration: int, main_image: ImagePart,
                     detail_image: Optional[ImagePart] = None,
                     number_of_scripts: int = 1) -> List[str]:
    from google.genai import types
    try:
        client, _ = get_client_and_mode()
        contents = build_contents(
            build_user_prompt(product_details, target_audience, other_details,
                              number_of_scripts, detail_image is not None),
            main_image,
            detail_image,
        )
        config_ = types.GenerateContentConfig(
            system_instruction=build_system_instruction(number_of_scripts, duration),
        )
        resp = client.models.generate_content(model=config.SCRIPT_MODEL, contents=contents, config=config_)

        scripts = split_scripts(resp.text, limit=number_of_scripts)
        if not scripts:
            raise ValueError("No script generated in the API response or response was empty.")
        if len(scripts) < number_of_scripts:
            logger.warning("Requested %d scripts, model returned %d", number_of_scripts, len(scripts))
        return scripts
    except Exception as e:
        logger.exception("Error calling Gemini API for script generation")
        raise GenerationError(f"Failed to generate script: {describe_error(e)}") from e
