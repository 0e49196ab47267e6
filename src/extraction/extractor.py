"""Color extraction orchestration.

``extract_colors`` runs the three scanner passes over one comment-stripped
stylesheet in a fixed order, sharing a single ``DeduplicationTracker``:

 1. keyword colors in declarations (``named_colors``)
 2. RGB triple custom properties (``rgb_triples``)
 3. hex / rgb() / hsl() literals (``literals``)

Output is grouped by pass (each pass in document order), not merged by text
position. Later passes skip keys claimed by earlier ones.

The diagnostic logger is passed per call; scanner faults are logged and the
remaining passes still run.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional

from config import settings
from domain.models import ColorEntry, PaletteSwatch
from parsing.css_comments import strip_comments
from parsing.html_styles import collect_styles
from parsing.resolvers import CustomPropertyIndex
from .literals import find_literal_matches, scan_literals
from .named_colors import scan_named_colors
from .rgb_triples import scan_rgb_triples
from .tracker import DeduplicationTracker

__all__ = [
    "extract_colors",
    "extract_from_stylesheets",
    "extract_colors_from_html",
    "summarize_palette",
]

_log = logging.getLogger(__name__)


def extract_colors(
    css_text: str,
    source: str,
    colors: Optional[List[ColorEntry]] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> List[ColorEntry]:
    """Extract every color usage from ``css_text``.

    Parameters
    ----------
    css_text: str
        Raw stylesheet text (comments allowed).
    source: str
        Label stored on each entry; never interpreted.
    colors: list[ColorEntry] | None
        Caller owned list to append to; a new list is used when omitted.
    logger: logging.Logger | None
        Sink for non-fatal scanner faults (defaults to this module's logger).

    Returns the list the entries were appended to.
    """
    out: List[ColorEntry] = colors if colors is not None else []
    if not css_text or not css_text.strip():
        return out
    log = logger or _log
    scan = strip_comments(css_text)
    tracker = DeduplicationTracker()

    scan_named_colors(scan, source, tracker, out, logger=log)
    scan_rgb_triples(scan, source, tracker, out, logger=log)
    try:
        matches = find_literal_matches(scan)
        custom_properties = CustomPropertyIndex.build(scan)
        scan_literals(
            scan,
            source,
            tracker,
            out,
            matches=matches,
            custom_properties=custom_properties,
            logger=log,
        )
    except Exception:  # noqa: BLE001
        log.error("Failed to extract color literals from CSS (source=%s)", source, exc_info=True)
    log.debug("Extracted %d color entries from %s", len(out), source)
    return out


def extract_from_stylesheets(
    sheets: Mapping[str, str],
    colors: Optional[List[ColorEntry]] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> List[ColorEntry]:
    """Extract several ``source -> css_text`` stylesheets into one list.

    Each stylesheet gets its own tracker, so de-duplication and occurrence
    numbering are scoped per source.
    """
    out: List[ColorEntry] = colors if colors is not None else []
    for source, css_text in sheets.items():
        extract_colors(css_text, source, out, logger=logger)
    return out


def extract_colors_from_html(
    html: str,
    source: str,
    colors: Optional[List[ColorEntry]] = None,
    *,
    logger: Optional[logging.Logger] = None,
) -> List[ColorEntry]:
    """Extract colors from ``<style>`` blocks and ``style`` attributes.

    Inline declarations are labelled ``source + ":inline"`` and have no
    selector.
    """
    out: List[ColorEntry] = colors if colors is not None else []
    styles = collect_styles(html)
    extract_colors(styles.stylesheet(), source, out, logger=logger)
    extract_colors(
        styles.inline_declarations(),
        source + settings.INLINE_SOURCE_SUFFIX,
        out,
        logger=logger,
    )
    return out


def summarize_palette(entries: Iterable[ColorEntry]) -> List[PaletteSwatch]:
    """Group entries by ``current_hex`` in first-seen order."""
    counts: Dict[str, int] = {}
    props: Dict[str, List[str]] = {}
    for entry in entries:
        counts[entry.current_hex] = counts.get(entry.current_hex, 0) + 1
        seen = props.setdefault(entry.current_hex, [])
        if entry.property not in seen:
            seen.append(entry.property)
    return [PaletteSwatch(hex=h, count=c, properties=props[h]) for h, c in counts.items()]
