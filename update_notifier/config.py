"""Runtime configuration for update-notifier.

All values are read from the environment once, at import time. Tests and
embedding applications override them by assigning the module attributes.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int, minimum: int = 0) -> int:
    """Read a non-negative integer, falling back to ``default`` on bad input."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using %d", name, raw, default)
        return default
    if value < minimum:
        logger.warning("%s=%d is below %d, using %d", name, value, minimum, default)
        return default
    return value


def _env_str(name: str, default: Optional[str]) -> Optional[str]:
    raw = os.environ.get(name)
    if raw is None:
        return default
    raw = raw.strip()
    return raw or None


# ============================================================================
# Notification behaviour
# ============================================================================

# Global opt-out, honoured by every notifier instance
DISABLED = _env_bool("NO_UPDATE_NOTIFIER")

# Show the notice even when running as an npm/yarn/pnpm script
NOTIFY_IN_SCRIPT = _env_bool("UPDATE_NOTIFIER_NOTIFY_IN_SCRIPT")

# ============================================================================
# Box presentation
# ============================================================================

BOX_PADDING = _env_int("UPDATE_NOTIFIER_PADDING", 1)
BORDER_STYLE = _env_str("UPDATE_NOTIFIER_BORDER_STYLE", "round") or "round"
BORDER_COLOR = _env_str("UPDATE_NOTIFIER_BORDER_COLOR", "yellow")

# ============================================================================
# Logging
# ============================================================================

LOG_LEVEL = _env_str("UPDATE_NOTIFIER_LOG_LEVEL", "WARNING") or "WARNING"
LOG_FORMAT = _env_str("UPDATE_NOTIFIER_LOG_FORMAT", "text") or "text"
LOG_FILE = _env_str("UPDATE_NOTIFIER_LOG_FILE", None)


def as_dict() -> dict:
    """Return the effective configuration (used by ``doctor``)."""
    return {
        "disabled": DISABLED,
        "notify_in_script": NOTIFY_IN_SCRIPT,
        "box_padding": BOX_PADDING,
        "border_style": BORDER_STYLE,
        "border_color": BORDER_COLOR,
        "log_level": LOG_LEVEL,
        "log_format": LOG_FORMAT,
        "log_file": LOG_FILE,
    }
