"""Color extraction CLI.

Lists every color usage found in one or more stylesheets (or HTML documents
with ``--html``), one line per entry, or as JSON via ``--json``.

Example:
  python -m cli.extract_colors theme.css --summary
  python -m cli.extract_colors index.html --html --json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List

from config import settings
from domain.models import ColorEntry
from extraction import extract_colors, extract_colors_from_html, summarize_palette

_log = logging.getLogger("cli.extract_colors")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Extract color usages from CSS stylesheets")
    p.add_argument("paths", nargs="+", help="Stylesheet (or HTML with --html) files to scan")
    p.add_argument(
        "--source",
        help="Source label stored on entries (single path only; default: file name)",
    )
    p.add_argument("--html", action="store_true", help="Treat inputs as HTML documents")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of text lines")
    p.add_argument("--summary", action="store_true", help="Append a palette summary")
    p.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help="Logging level for diagnostics (default from THEMECOLORS_LOG_LEVEL)",
    )
    return p.parse_args(argv)


def _format_entry(entry: ColorEntry) -> str:
    return (
        f"{entry.source} | {entry.selector or '-'} | {entry.property} #{entry.occurrence}"
        f" | {entry.original_token} -> {entry.current_hex}"
    )


def run_extract(paths: List[str], source: str | None, html: bool) -> List[ColorEntry]:
    colors: List[ColorEntry] = []
    for path in paths:
        label = source or os.path.basename(path) or settings.DEFAULT_SOURCE
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        if html:
            extract_colors_from_html(text, label, colors, logger=_log)
        else:
            extract_colors(text, label, colors, logger=_log)
    return colors


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=str(args.log_level).upper(), format="%(levelname)s %(name)s: %(message)s")
    if args.source and len(args.paths) > 1:
        print("--source can only be used with a single path", file=sys.stderr)
        return 2
    for path in args.paths:
        if not os.path.isfile(path):
            print(f"Stylesheet not found: {path}", file=sys.stderr)
            return 2
    try:
        colors = run_extract(args.paths, args.source, args.html)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read input: {e}", file=sys.stderr)
        return 2
    palette = summarize_palette(colors) if args.summary else []
    if args.json:
        payload: Dict[str, Any] = {"entries": [c.to_dict() for c in colors]}
        if args.summary:
            payload["palette"] = [
                {"hex": s.hex, "count": s.count, "properties": s.properties} for s in palette
            ]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for entry in colors:
            print(_format_entry(entry))
        if args.summary:
            print(f"Palette ({len(palette)} colors):")
            for swatch in palette:
                print(f"  {swatch.hex} x{swatch.count}: {', '.join(swatch.properties)}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
