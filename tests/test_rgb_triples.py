"""Tests for RGB triple custom property scanning."""

import logging

from extraction import rgb_triples
from extraction.rgb_triples import scan_rgb_triples, triple_to_hex
from extraction.tracker import DeduplicationTracker


def _scan(css, source="s"):
    out = []
    scan_rgb_triples(css, source, DeduplicationTracker(), out)
    return out


def test_triple_to_hex():
    assert triple_to_hex("10, 20, 30") == "#0a141e"
    assert triple_to_hex("255 255 255") == "#ffffff"
    assert triple_to_hex("10, 20, 999") is None


def test_brand_triple_entry():
    (entry,) = _scan("--brand-rgb: 10, 20, 30;")
    assert entry.property == "--brand-rgb"
    assert entry.current_hex == "#0a141e"
    assert entry.original_token == "10, 20, 30"
    assert entry.selector == ""
    assert entry.occurrence == 1


def test_out_of_range_triple_dropped():
    assert _scan("--bad-rgb: 10, 20, 999;") == []


def test_separator_variants_and_selector():
    css = ":root { --a: 1 2 3; --b:4,5,6 ; }"
    entries = _scan(css)
    assert [e.property for e in entries] == ["--a", "--b"]
    assert [e.current_hex for e in entries] == ["#010203", "#040506"]
    assert all(e.selector == ":root" for e in entries)


def test_non_triple_shapes_ignored():
    css = ":root { --two: 1, 2; --four: 1, 2, 3, 4; --wide: 1000, 2, 3; color: 1, 2, 3; }"
    assert _scan(css) == []


def test_same_triple_in_repeated_rule_collapses():
    css = ":root { --x: 1, 2, 3; } :root { --x: 1, 2, 3; } .dark { --x: 1, 2, 3; }"
    entries = _scan(css)
    assert [(e.selector, e.occurrence) for e in entries] == [(":root", 1), (".dark", 2)]


def test_scanner_fault_is_logged_not_raised(monkeypatch, caplog, diag_logger):
    def boom(text, offset):
        raise RuntimeError("selector lookup failed")

    monkeypatch.setattr(rgb_triples, "resolve_selector", boom)
    out = []
    with caplog.at_level(logging.ERROR, logger=diag_logger.name):
        added = scan_rgb_triples("--x: 1, 2, 3;", "s", DeduplicationTracker(), out, logger=diag_logger)
    assert added == 0
    assert out == []
    assert "Failed to extract RGB triples" in caplog.text
