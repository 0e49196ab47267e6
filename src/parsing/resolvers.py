"""Offset based context lookups for color tokens.

Given a character offset into comment-stripped CSS these helpers answer two
questions without building a syntax tree:

 - Which rule does the offset sit in? (``resolve_selector``)
 - Which property owns the value at the offset? (``resolve_property``)

Both are heuristics over raw text and never raise; malformed input degrades
to ``""`` / ``"(unknown)"``.

``CustomPropertyIndex`` pre-computes the spans of ``--name: value`` declarations
so literal tokens inside a custom property value can be attributed to the
variable directly.
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass
from typing import List, Optional

from config import settings

__all__ = [
    "resolve_selector",
    "resolve_property",
    "CustomPropertyDeclaration",
    "CustomPropertyIndex",
]

WS_RE = re.compile(r"\s+")
# The name must not continue an identifier (BEM classes like .btn--primary:hover)
CUSTOM_PROPERTY_RE = re.compile(r"(?<![\w-])(?P<prop>--[\w-]+)\s*:(?P<val>[^;{}]*)")
STATEMENT_DELIMITERS = ";{}"


def resolve_selector(text: str, offset: int) -> str:
    """Return the selector of the rule enclosing ``offset`` (or ``""``)."""
    try:
        open_brace = text.rfind("{", 0, max(0, offset) + 1)
        if open_brace < 0:
            return ""
        prev_close = text.rfind("}", 0, open_brace)
        start = prev_close + 1 if prev_close >= 0 else 0
        selector = WS_RE.sub(" ", text[start:open_brace]).strip()
        if len(selector) > settings.SELECTOR_MAX_LENGTH:
            selector = selector[: settings.SELECTOR_MAX_LENGTH] + settings.SELECTOR_ELLIPSIS
        return selector
    except Exception:  # noqa: BLE001
        return ""


def _is_ident_char(ch: str) -> bool:
    return ch.isalnum() or ch in "-_"


def _identifier_before(text: str, colon: int) -> str:
    i = colon - 1
    while i >= 0 and _is_ident_char(text[i]):
        i -= 1
    return text[i + 1 : colon]


def _statement_start(text: str, offset: int) -> int:
    i = min(offset, len(text)) - 1
    while i >= 0 and text[i] not in STATEMENT_DELIMITERS:
        i -= 1
    return i + 1


def resolve_property(text: str, offset: int) -> str:
    """Return the property name owning the value at ``offset``.

    First looks for ``name:`` inside the current statement (bounded by the
    nearest ``;``, ``{`` or ``}``), then falls back to the last colon within
    the preceding window of characters.
    """
    try:
        offset = max(0, min(offset, len(text)))
        start = _statement_start(text, offset)
        colon = text.rfind(":", start, offset)
        if colon >= 0:
            prop = _identifier_before(text, colon)
            if prop:
                return prop
        window = text[max(0, offset - settings.PROPERTY_WINDOW) : offset]
        colon = window.rfind(":")
        if colon < 0:
            return settings.UNKNOWN_PROPERTY
        return _identifier_before(window, colon) or settings.UNKNOWN_PROPERTY
    except Exception:  # noqa: BLE001
        return settings.UNKNOWN_PROPERTY


@dataclass(frozen=True, slots=True)
class CustomPropertyDeclaration:
    name: str
    value_start: int
    value_end: int  # exclusive; position of the terminating ';' / '{' / '}'

    def contains(self, offset: int) -> bool:
        return self.value_start <= offset < self.value_end


class CustomPropertyIndex:
    """Sorted custom property declarations of one stylesheet."""

    def __init__(self, declarations: List[CustomPropertyDeclaration]):
        self._declarations = declarations
        self._starts = [d.value_start for d in declarations]

    @classmethod
    def build(cls, text: str) -> "CustomPropertyIndex":
        decls = [
            CustomPropertyDeclaration(
                name=m.group("prop"),
                value_start=m.start("val"),
                value_end=m.end("val"),
            )
            for m in CUSTOM_PROPERTY_RE.finditer(text)
        ]
        return cls(decls)

    def __len__(self) -> int:
        return len(self._declarations)

    def owner_of(self, offset: int) -> Optional[str]:
        """Return the custom property whose value span contains ``offset``."""
        pos = bisect.bisect_right(self._starts, offset) - 1
        if pos < 0:
            return None
        decl = self._declarations[pos]
        return decl.name if decl.contains(offset) else None
