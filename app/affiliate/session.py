# affiliate/session.py
# -----------------------------------------------------------------------------
# Session-state helpers shared by both pages. They work on any MutableMapping,
# so st.session_state in the app and a plain dict in tests.
#   * the main photo is shared between Script Generator and Image Renderer
#   * each operation owns a busy flag, a result slot and an error slot
# -----------------------------------------------------------------------------
import logging
from typing import Callable, MutableMapping, Optional

from affiliate import config
from affiliate.forms import DETAIL_TEXT
from affiliate.gemini_client import GenerationError
from affiliate.uploads import InvalidImageError

logger = logging.getLogger(__name__)

SCRIPT = "script"
RENDER = "render"

# operation -> (result key, error key, busy key, empty result)
OPERATIONS = {
    SCRIPT: ("scripts", "script_error", "script_busy", []),
    RENDER: ("rendered_image", "render_error", "render_busy", None),
}

DEFAULTS = {
    "main_image": None,
    "detail_image": None,
    "detail_mode": DETAIL_TEXT,
    # form inputs; kept outside widget keys so they survive hidden widgets and page switches
    "product_details": "",
    "target_audience": "",
    "other_details": "",
    "duration": config.DURATION_DEFAULT,
    "number_of_scripts": config.SCRIPTS_DEFAULT,
    "render_prompt": "",
    "scripts": [],
    "script_error": None,
    "script_busy": False,
    "rendered_image": None,
    "render_error": None,
    "render_busy": False,
}


def init_state(state: MutableMapping) -> None:
    for k, v in DEFAULTS.items():
        if k not in state:
            state[k] = list(v) if isinstance(v, list) else v


def _reset(state: MutableMapping, op: str) -> None:
    result_key, error_key, _, empty = OPERATIONS[op]
    state[result_key] = list(empty) if isinstance(empty, list) else empty
    state[error_key] = None


def set_main_image(state: MutableMapping, image) -> None:
    """A new main photo invalidates everything produced from the previous one."""
    state["main_image"] = image
    _reset(state, SCRIPT)
    _reset(state, RENDER)


def clear_main_image(state: MutableMapping) -> None:
    state["main_image"] = None


def set_detail_image(state: MutableMapping, image) -> None:
    state["detail_image"] = image


def clear_detail_image(state: MutableMapping) -> None:
    state["detail_image"] = None


def is_busy(state: MutableMapping, op: str) -> bool:
    return bool(state.get(OPERATIONS[op][2]))


def fail(state: MutableMapping, op: str, message: str) -> None:
    """Validation failure: show the message, drop any stale result, release the busy flag."""
    _reset(state, op)
    state[OPERATIONS[op][1]] = message
    state[OPERATIONS[op][2]] = False


def start(state: MutableMapping, op: str) -> bool:
    """Raise the busy flag; False if the operation is already in flight."""
    busy_key = OPERATIONS[op][2]
    if state.get(busy_key):
        return False
    _reset(state, op)
    state[busy_key] = True
    return True


def run(state: MutableMapping, op: str, call: Callable[[], object]) -> bool:
    """
    Execute `call` for a started operation and store its result or its error message.
    The busy flag is always released. Returns True on success.
    """
    result_key, error_key, busy_key, _ = OPERATIONS[op]
    try:
        state[result_key] = call()
        return True
    except (GenerationError, InvalidImageError) as e:
        state[error_key] = str(e)
    except Exception as e:
        logger.exception("Unexpected error during %s operation", op)
        state[error_key] = str(e) or "An unknown error occurred."
    finally:
        state[busy_key] = False
    return False


def submit(state: MutableMapping, op: str, error: Optional[str], call: Callable[[], object]) -> bool:
    """Run a started operation unless validation produced an error message."""
    if error:
        fail(state, op, error)
        return False
    return run(state, op, call)
