"""Stylesheet text embedded in HTML documents (BeautifulSoup version)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from bs4 import BeautifulSoup

__all__ = ["HtmlStyles", "collect_styles"]


@dataclass
class HtmlStyles:
    blocks: List[str] = field(default_factory=list)  # <style> element contents
    inline: List[str] = field(default_factory=list)  # style="..." attribute values

    def stylesheet(self) -> str:
        return "\n".join(self.blocks)

    def inline_declarations(self) -> str:
        decls: List[str] = []
        for value in self.inline:
            value = value.strip()
            if not value:
                continue
            decls.append(value if value.endswith(";") else value + ";")
        return "\n".join(decls)


def collect_styles(html: str) -> HtmlStyles:
    soup = BeautifulSoup(html, "html.parser")
    styles = HtmlStyles()
    for tag in soup.find_all("style"):
        text = str(tag.string or "")
        if text.strip():
            styles.blocks.append(text)
    for tag in soup.find_all(style=True):
        styles.inline.append(tag["style"])
    return styles
