"""Global configuration and constants for color extraction."""

from __future__ import annotations

import os
from typing import Final

UNKNOWN_PROPERTY: Final = "(unknown)"
SELECTOR_MAX_LENGTH: Final = 120
SELECTOR_ELLIPSIS: Final = "..."
PROPERTY_WINDOW: Final = 200  # characters searched back for a ':' fallback

DEFAULT_SOURCE: Final = "stylesheet"
INLINE_SOURCE_SUFFIX: Final = ":inline"

# Only consulted by the CLI when it configures logging
LOG_LEVEL: Final = os.environ.get("THEMECOLORS_LOG_LEVEL", "WARNING")
