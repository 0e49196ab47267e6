"""Tests for keyword color scanning inside declarations."""

import logging

from extraction import named_colors
from extraction.named_colors import scan_named_colors, split_value_tokens
from extraction.tracker import DeduplicationTracker


def _scan(css, source="s", tracker=None):
    out = []
    scan_named_colors(css, source, tracker or DeduplicationTracker(), out)
    return out


def test_split_is_naive_about_parentheses():
    assert split_value_tokens("1px solid rgba(0, 128, 0, 0.5)") == [
        "1px",
        "solid",
        "rgba(0",
        "128",
        "0",
        "0.5",
    ]
    assert split_value_tokens(" red ,blue\tgreen\n") == ["red", "blue", "green"]
    assert split_value_tokens("url(a.png) , ;") == ["url(a.png"]


def test_border_color_tomato():
    (entry,) = _scan("border-color: tomato;")
    assert entry.property == "border-color"
    assert entry.current_hex == "#ff6347"
    assert entry.original_token == "tomato"
    assert entry.display_title == "border-color"


def test_keyword_found_in_multi_value_declaration():
    (entry,) = _scan(".btn { border: 1px solid DarkSlateBlue; }")
    assert entry.selector == ".btn"
    assert entry.original_token == "DarkSlateBlue"
    assert entry.current_hex == "#483d8b"


def test_literals_and_non_colors_are_skipped():
    css = (
        ".a { color: #fff; background: rgb(1, 2, 3); fill: hsl(1, 2%, 3%);"
        " font-family: Arial, sans-serif; transition: color 1s; background-image: url(red.png); }"
    )
    assert _scan(css) == []


def test_custom_property_keyword():
    (entry,) = _scan(":root { --accent: Orange; }")
    assert entry.property == "--accent"
    assert entry.current_hex == "#ffa500"


def test_repeats_within_rule_collapse_but_properties_are_separate():
    css = ".a { border: 1px solid red; outline: red; color: red red; }"
    entries = _scan(css)
    assert [(e.property, e.occurrence) for e in entries] == [
        ("border", 1),
        ("outline", 1),
        ("color", 1),
    ]


def test_occurrence_counts_across_rules():
    css = ".a { color: navy; } .b { color: navy; } .c { color: teal; }"
    entries = _scan(css)
    assert [(e.selector, e.occurrence) for e in entries] == [(".a", 1), (".b", 2), (".c", 3)]


def test_declaration_without_semicolon_not_matched():
    assert _scan(".a { color: red }") == []


def test_scanner_fault_is_logged_not_raised(monkeypatch, caplog, diag_logger):
    def boom(token):
        raise RuntimeError("converter exploded")

    monkeypatch.setattr(named_colors, "try_parse_color_token", boom)
    out = []
    with caplog.at_level(logging.ERROR, logger=diag_logger.name):
        scan_named_colors("a { color: red; }", "s", DeduplicationTracker(), out, logger=diag_logger)
    assert out == []
    assert "Failed to extract named tokens" in caplog.text
