"""Domain models for stylesheet color extraction."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Dict, List


class ColorKind(str, Enum):
    """Syntax family a color token was recognised as."""

    NAMED = "named"
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"


@dataclass(frozen=True, slots=True)
class ParsedColor:
    kind: ColorKind
    hex: str  # canonical lowercase #rrggbb


@dataclass(frozen=True, slots=True)
class ColorEntry:
    """One distinguishable color usage found in a stylesheet.

    Attributes
    ----------
    source: Caller supplied stylesheet label (never parsed)
    property: Owning CSS property / custom property, or ``"(unknown)"``
    selector: Enclosing rule selector (collapsed, truncated) or ``""``
    occurrence: 1-based running count per ``(source, property)``
    original_token: Token text exactly as found in the stylesheet
    current_hex: Canonical hex for the token
    display_title: Editor facing label; starts out equal to ``property``
    """

    source: str
    property: str
    selector: str
    occurrence: int
    original_token: str
    current_hex: str
    display_title: str

    @classmethod
    def create(
        cls,
        source: str,
        property: str,
        selector: str,
        occurrence: int,
        original_token: str,
        current_hex: str,
    ) -> "ColorEntry":
        return cls(
            source=source,
            property=property,
            selector=selector,
            occurrence=occurrence,
            original_token=original_token,
            current_hex=current_hex,
            display_title=property,
        )

    def with_title(self, title: str) -> "ColorEntry":
        return replace(self, display_title=title)

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class PaletteSwatch:
    hex: str
    count: int
    properties: List[str]
