"""Keyword colors (``tomato``, ``DarkSlateBlue``) inside arbitrary declarations.

Every ``property: value;`` declaration is split into candidate words and each
word is offered to the color converter; only words it classifies as named
colors are kept. Hex, ``rgb()`` and ``hsl()`` spellings are left to the
literal pass and bare channel triples to the RGB triple pass.

The value split is deliberately naive: commas first, then whitespace, with
no awareness of parentheses. ``rgb(0, 0, 0)`` embedded in a value therefore
falls apart into fragments, none of which is a keyword color.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from domain.models import ColorEntry, ColorKind
from parsing.color_conversion import try_parse_color_token
from parsing.resolvers import resolve_selector
from .rgb_triples import RGB_TRIPLE_RE
from .tracker import DeduplicationTracker

__all__ = ["DECLARATION_RE", "split_value_tokens", "scan_named_colors"]

_log = logging.getLogger(__name__)

DECLARATION_RE = re.compile(r"(?P<prop>--?[\w-]+|\b[\w-]+\b)\s*:\s*(?P<val>[^;{]+);", re.IGNORECASE)
_WS_SPLIT_RE = re.compile(r"[ \t\r\n]+")
_SKIP_PREFIX_RE = re.compile(r"#|rgb|hsl", re.IGNORECASE)


def split_value_tokens(value: str) -> List[str]:
    """Split a declaration value into trimmed candidate words."""
    tokens: List[str] = []
    for piece in value.split(","):
        for raw in _WS_SPLIT_RE.split(piece):
            token = raw.strip().rstrip(";").strip()
            token = token.rstrip(")(").strip().rstrip(";,").strip()
            if token:
                tokens.append(token)
    return tokens


def _handled_elsewhere(token: str) -> bool:
    return bool(_SKIP_PREFIX_RE.match(token)) or bool(RGB_TRIPLE_RE.fullmatch(token))


def scan_named_colors(
    text: str,
    source: str,
    tracker: DeduplicationTracker,
    colors: List[ColorEntry],
    *,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Append entries for keyword colors; return how many were added."""
    log = logger or _log
    added = 0
    try:
        for decl in DECLARATION_RE.finditer(text):
            prop = decl.group("prop").strip()
            value = decl.group("val").strip()
            if not prop or not value:
                continue
            selector = resolve_selector(text, decl.start())
            for token in split_value_tokens(value):
                if _handled_elsewhere(token):
                    continue
                parsed = try_parse_color_token(token)
                if parsed is None or parsed.kind is not ColorKind.NAMED:
                    continue
                entry = tracker.emit(source, prop, selector, token, parsed.hex)
                if entry is None:
                    continue
                colors.append(entry)
                added += 1
    except Exception:  # noqa: BLE001
        log.error("Failed to extract named tokens from CSS (source=%s)", source, exc_info=True)
    return added
