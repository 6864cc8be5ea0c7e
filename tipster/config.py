"""Runtime configuration defaults for input limits, sliders and debug logging."""

from __future__ import annotations

import os
from pathlib import Path

MAX_DECIMAL_PLACES = 2

TAX_RATE_MIN = 0.0
TAX_RATE_MAX = 1.0
TAX_RATE_STEP = 0.01

GROUP_SIZE_MIN = 1
GROUP_SIZE_MAX = 20

SLIDER_WIDTH_CHARS = 24

DEBUG_LOG_PATH = "/tmp/tipster-debug.log"
_DEBUG_LOG_ENV = "TIPSTER_DEBUG_LOG"


def resolve_debug_log_path() -> Path:
    """Return the debug log path, honoring TIPSTER_DEBUG_LOG when set."""
    env_override = os.environ.get(_DEBUG_LOG_ENV, "").strip()
    return Path(env_override or DEBUG_LOG_PATH)
