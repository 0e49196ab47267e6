"""Hex, ``rgb()`` and ``hsl()`` color literals anywhere in a stylesheet.

Alternatives are tried in order at each position:

 - ``hex``: ``#`` plus exactly 3 or 6 hex digits followed by a word boundary
   (``#ffffff80`` is not matched at all).
 - ``rgb``: ``rgb(``/``rgba(`` with three 1-3 digit channels and an optional
   alpha of ``0``, ``1`` or a decimal fraction.
 - ``hsl``: as ``rgb`` but the 2nd and 3rd components carry ``%``.

The owning property comes from the enclosing custom property declaration when
there is one, otherwise from the offset based property lookup.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from config import settings
from domain.models import ColorEntry
from parsing.color_conversion import parse_color_token
from parsing.errors import ColorParseError
from parsing.resolvers import CustomPropertyIndex, resolve_property, resolve_selector
from .tracker import DeduplicationTracker

__all__ = ["LITERAL_RE", "find_literal_matches", "scan_literals"]

_log = logging.getLogger(__name__)

_ALPHA = r"(?:\s*,\s*(?:0|1|0?\.[0-9]+))?"
LITERAL_RE = re.compile(
    r"(?P<hex>\#(?:[0-9a-fA-F]{3}\b|[0-9a-fA-F]{6}\b))"
    r"|(?P<rgb>rgba?\(\s*[0-9]{1,3}\s*,\s*[0-9]{1,3}\s*,\s*[0-9]{1,3}" + _ALPHA + r"\s*\))"
    r"|(?P<hsl>hsla?\(\s*[0-9]{1,3}\s*,\s*[0-9]{1,3}%\s*,\s*[0-9]{1,3}%" + _ALPHA + r"\s*\))"
)


def find_literal_matches(text: str) -> List[re.Match[str]]:
    return list(LITERAL_RE.finditer(text))


def _owning_property(text: str, offset: int, custom_properties: CustomPropertyIndex) -> str:
    prop = custom_properties.owner_of(offset)
    if not prop:
        prop = resolve_property(text, offset)
    return prop or settings.UNKNOWN_PROPERTY


def scan_literals(
    text: str,
    source: str,
    tracker: DeduplicationTracker,
    colors: List[ColorEntry],
    *,
    matches: Optional[Sequence[re.Match[str]]] = None,
    custom_properties: Optional[CustomPropertyIndex] = None,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Append entries for literal color tokens; return how many were added.

    ``matches`` / ``custom_properties`` may be supplied pre-computed for
    ``text``; both are derived here otherwise.
    """
    log = logger or _log
    if matches is None:
        matches = find_literal_matches(text)
    if custom_properties is None:
        custom_properties = CustomPropertyIndex.build(text)
    added = 0
    for m in matches:
        token = m.group(0).strip()
        if not token:
            continue
        offset = m.start()
        prop = _owning_property(text, offset, custom_properties)
        selector = resolve_selector(text, offset)
        if tracker.is_seen(source, prop, selector, token):
            continue
        try:
            hex_value = parse_color_token(token).hex
        except ColorParseError as exc:
            if not token.startswith("#"):
                log.debug("Dropping unparseable color literal %r: %s", token, exc)
                continue
            hex_value = token.lower()
        entry = tracker.emit(source, prop, selector, token, hex_value)
        if entry is None:
            continue
        colors.append(entry)
        added += 1
    return added
