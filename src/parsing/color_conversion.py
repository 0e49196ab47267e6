"""Color token conversion to canonical hex.

Classifies a single CSS color token as a named keyword, hex literal, ``rgb()``
/ ``rgba()`` or ``hsl()`` / ``hsla()`` function and converts it to a lowercase
``#rrggbb`` string. Keyword and hex handling come from ``webcolors`` (CSS3
keyword set); HSL goes through ``colorsys``. Alpha components are validated
but not represented in the output.

Anything that is not a recognised color raises ``ColorParseError``. Callers
that only want a yes/no answer use ``try_parse_color_token``.

>>> parse_color_token('Tomato').hex
'#ff6347'
>>> parse_color_token('#ABC').hex
'#aabbcc'
>>> parse_color_token('rgba(0, 128, 0, 0.5)').hex
'#008000'
>>> parse_color_token('hsl(120, 100%, 25%)').hex
'#008000'
"""

from __future__ import annotations

import colorsys
import re
from typing import List, Optional

import webcolors

from domain.models import ColorKind, ParsedColor
from parsing.errors import ColorParseError

__all__ = [
    "parse_color_token",
    "try_parse_color_token",
]

_NUM = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"
_ALPHA = rf"(?P<alpha>{_NUM}%?)"

# Legacy comma syntax and modern space syntax (optional "/ alpha").
FUNC_RE = re.compile(
    rf"(?P<name>rgba?|hsla?)\(\s*"
    rf"(?P<a>{_NUM}(?:%|deg)?)"
    rf"(?:"
    rf"\s*,\s*(?P<b>{_NUM}%?)\s*,\s*(?P<c>{_NUM}%?)(?:\s*,\s*{_ALPHA})?"
    rf"|"
    rf"\s+(?P<b2>{_NUM}%?)\s+(?P<c2>{_NUM}%?)(?:\s*/\s*(?P<alpha2>{_NUM}%?))?"
    rf")\s*\)",
    re.IGNORECASE,
)


def _fail(token: str, reason: str) -> ColorParseError:
    return ColorParseError(f"Unknown color format: {token!r} ({reason})", context={"token": token})


def _check_alpha(raw: Optional[str], token: str) -> None:
    if raw is None:
        return
    if raw.endswith("%"):
        ok = 0.0 <= float(raw[:-1]) <= 100.0
    else:
        ok = 0.0 <= float(raw) <= 1.0
    if not ok:
        raise _fail(token, "alpha out of range")


def _percent(raw: str, token: str) -> float:
    if not raw.endswith("%"):
        raise _fail(token, "expected a percentage")
    pct = float(raw[:-1])
    if not 0.0 <= pct <= 100.0:
        raise _fail(token, "percentage out of range")
    return pct


def _rgb_hex(channels: List[str], token: str) -> str:
    # webcolors clamps out-of-range input; range errors are rejected here first
    if all(c.endswith("%") for c in channels):
        for c in channels:
            _percent(c, token)
        return webcolors.rgb_percent_to_hex(tuple(channels))  # type: ignore[arg-type]
    if any(c.endswith("%") or "." in c or c.lower().endswith("deg") for c in channels):
        raise _fail(token, "channels must be integers or all percentages")
    values = [int(c) for c in channels]
    if any(not 0 <= v <= 255 for v in values):
        raise _fail(token, "channel out of range")
    return webcolors.rgb_to_hex(tuple(values))  # type: ignore[arg-type]


def _hsl_hex(hue_raw: str, s_raw: str, l_raw: str, token: str) -> str:
    if hue_raw.lower().endswith("deg"):
        hue_raw = hue_raw[:-3]
    if hue_raw.endswith("%"):
        raise _fail(token, "percentage hue")
    hue = float(hue_raw) % 360
    s = _percent(s_raw, token) / 100.0
    l = _percent(l_raw, token) / 100.0
    # colorsys works in HLS order with all components in 0..1
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, l, s)
    rgb = tuple(max(0, min(255, int(c * 255 + 0.5))) for c in (r, g, b))
    return webcolors.rgb_to_hex(rgb)  # type: ignore[arg-type]


def _parse_function(token: str, match: re.Match[str]) -> ParsedColor:
    name = match.group("name").lower()
    a = match.group("a")
    b = match.group("b") if match.group("b") is not None else match.group("b2")
    c = match.group("c") if match.group("c") is not None else match.group("c2")
    alpha = match.group("alpha") if match.group("alpha") is not None else match.group("alpha2")
    _check_alpha(alpha, token)
    if name.startswith("rgb"):
        return ParsedColor(ColorKind.RGB, _rgb_hex([a, b, c], token))
    return ParsedColor(ColorKind.HSL, _hsl_hex(a, b, c, token))


def parse_color_token(token: str) -> ParsedColor:
    """Classify ``token`` and convert it to canonical lowercase ``#rrggbb``.

    Raises ``ColorParseError`` when the token is not a supported color.
    """
    value = token.strip()
    if not value:
        raise _fail(token, "empty token")
    if value.startswith("#"):
        try:
            return ParsedColor(ColorKind.HEX, webcolors.normalize_hex(value))
        except ValueError as exc:
            raise _fail(token, "hex must have 3 or 6 digits") from exc
    m = FUNC_RE.fullmatch(value)
    if m:
        return _parse_function(token, m)
    try:
        return ParsedColor(ColorKind.NAMED, webcolors.name_to_hex(value, spec=webcolors.CSS3))
    except ValueError as exc:
        raise _fail(token, "unrecognised syntax") from exc


def try_parse_color_token(token: str) -> Optional[ParsedColor]:
    try:
        return parse_color_token(token)
    except ColorParseError:
        return None
