"""Custom properties holding bare ``R, G, B`` channel triples.

Frameworks such as Bootstrap publish colors twice: ``--bs-primary: #0d6efd``
and ``--bs-primary-rgb: 13, 110, 253`` (consumed as ``rgba(var(--x), .5)``).
The second form carries no color syntax at all, so it is matched by shape:
a ``--name`` declaration whose value is exactly three 1-3 digit integers.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from domain.models import ColorEntry
from parsing.resolvers import resolve_selector
from .tracker import DeduplicationTracker

__all__ = ["RGB_TRIPLE_DECL_RE", "RGB_TRIPLE_RE", "triple_to_hex", "scan_rgb_triples"]

_log = logging.getLogger(__name__)

RGB_TRIPLE_DECL_RE = re.compile(
    r"(?P<prop>--[\w-]+)\s*:\s*(?P<vals>[0-9]{1,3}(?:\s*[,\s]\s*[0-9]{1,3}){2})\s*;"
)
RGB_TRIPLE_RE = re.compile(r"[0-9]{1,3}(?:\s*[,\s]\s*[0-9]{1,3}){2}")
_CHANNEL_RE = re.compile(r"[0-9]{1,3}")


def triple_to_hex(values: str) -> Optional[str]:
    """Return ``#rrggbb`` for a ``"R, G, B"`` triple, ``None`` if out of range."""
    channels = [int(v) for v in _CHANNEL_RE.findall(values)]
    if len(channels) != 3 or any(c > 255 for c in channels):
        return None
    r, g, b = channels
    return f"#{r:02x}{g:02x}{b:02x}"


def scan_rgb_triples(
    text: str,
    source: str,
    tracker: DeduplicationTracker,
    colors: List[ColorEntry],
    *,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Append entries for RGB triple custom properties; return how many."""
    log = logger or _log
    added = 0
    try:
        for m in RGB_TRIPLE_DECL_RE.finditer(text):
            prop = m.group("prop").strip()
            vals = m.group("vals").strip()
            hex_value = triple_to_hex(vals)
            if hex_value is None:
                log.debug("Skipping out-of-range RGB triple %s: %s", prop, vals)
                continue
            selector = resolve_selector(text, m.start())
            entry = tracker.emit(source, prop, selector, vals, hex_value)
            if entry is None:
                continue
            colors.append(entry)
            added += 1
    except Exception:  # noqa: BLE001
        log.error("Failed to extract RGB triples from CSS (source=%s)", source, exc_info=True)
    return added
