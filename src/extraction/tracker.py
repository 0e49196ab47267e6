"""Per-call de-duplication and occurrence numbering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Set, Tuple

from domain.models import ColorEntry

__all__ = ["DedupKey", "DeduplicationTracker"]

DedupKey = Tuple[str, str, str, str]  # (source, property, selector, original_token)


@dataclass
class DeduplicationTracker:
    """Shared by all scanner passes of a single extraction call.

    ``seen_keys`` suppresses repeats of the same token in the same rule and
    property; ``occurrence_counts`` numbers the accepted entries per
    ``(source, property)`` so the sequence stays dense (1..N).
    """

    seen_keys: Set[DedupKey] = field(default_factory=set)
    occurrence_counts: Dict[Tuple[str, str], int] = field(default_factory=dict)

    def is_seen(self, source: str, prop: str, selector: str, token: str) -> bool:
        return (source, prop, selector, token) in self.seen_keys

    def emit(
        self,
        source: str,
        prop: str,
        selector: str,
        token: str,
        hex_value: str,
    ) -> ColorEntry | None:
        """Claim the key and build the next numbered entry.

        Returns ``None`` when the key was already claimed; the counter is only
        advanced for entries actually produced.
        """
        key = (source, prop, selector, token)
        if key in self.seen_keys:
            return None
        self.seen_keys.add(key)
        occ_key = (source, prop)
        occurrence = self.occurrence_counts.get(occ_key, 0) + 1
        self.occurrence_counts[occ_key] = occurrence
        return ColorEntry.create(
            source=source,
            property=prop,
            selector=selector,
            occurrence=occurrence,
            original_token=token,
            current_hex=hex_value,
        )
