"""CSS comment stripping that keeps character offsets stable.

Comments are blanked rather than removed: every character inside ``/* ... */``
becomes a space except newlines, which are kept. Offset based lookups made on
the stripped text (selector / property resolution) therefore land on the same
declarations as in the original source. An unterminated comment runs to the
end of the text.
"""

from __future__ import annotations

import re

__all__ = ["strip_comments"]

COMMENT_RE = re.compile(r"/\*.*?(?:\*/|\Z)", re.DOTALL)


def _blank(match: re.Match[str]) -> str:
    return "".join(ch if ch in "\r\n" else " " for ch in match.group(0))


def strip_comments(text: str) -> str:
    if "/*" not in text:
        return text
    return COMMENT_RE.sub(_blank, text)
