# Shared fixtures: a per-test diagnostics logger (mirrors how callers pass a
# logger into each extraction call) and a small multi-rule stylesheet sample.

import logging

import pytest


@pytest.fixture
def diag_logger(request):
    logger = logging.getLogger(f"tests.diagnostics.{request.node.name}")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def theme_css():
    return (
        ".card { background: #FF0000; border: 1px solid rgba(0, 128, 0, 0.5); }\n"
        ".alt  { background: #FF0000; }\n"
    )
