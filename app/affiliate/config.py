import os, logging                                   # Environment (os) and standard logging
from dotenv import load_dotenv                       # Reads variables from a .env file
load_dotenv()                                        # Loads .env (if present) into the process environment

# ============================================================================
# Credentials and model selection
# - Vertex AI is used when GCP_PROJECT is set (validated on first use).
# - Otherwise the public Gemini API with GOOGLE_API_KEY (API_KEY also accepted).
# ============================================================================
GCP_PROJECT = os.getenv("GCP_PROJECT")               # Google Cloud project (Vertex AI mode)
GCP_LOCATION = os.getenv("GCP_LOCATION", "global")   # Vertex region; "us-central1" is common too
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY") or os.getenv("API_KEY")
FORCE_PUBLIC = os.getenv("FORCE_GEMINI_PUBLIC", "").lower() in ("1", "true", "yes")

SCRIPT_MODEL = os.getenv("GEMINI_SCRIPT_MODEL", "gemini-2.5-flash")
IMAGE_MODEL = os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ============================================================================
# Form limits shared by the pages and the validators
# ============================================================================
DURATION_MIN, DURATION_MAX, DURATION_STEP, DURATION_DEFAULT = 10, 180, 5, 60
SCRIPTS_MIN, SCRIPTS_MAX, SCRIPTS_DEFAULT = 1, 5, 1
UPLOAD_TYPES = ["png", "jpg", "jpeg", "gif", "webp"]

_LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(message)s"


def setup_logging(level: str = None):
    """Configure the root logger once; later calls are no-ops (basicConfig semantics)."""
    logging.basicConfig(level=getattr(logging, (level or LOG_LEVEL), logging.INFO), format=_LOG_FORMAT)
