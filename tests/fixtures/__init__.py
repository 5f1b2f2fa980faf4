"""Test fixtures for converter and CLI tests.

This module provides sample markdown documents together with the HTML
the converter is expected to produce for them.
"""

from .sample_markdown import (
    SAMPLE_MARKDOWN_SIMPLE,
    SAMPLE_HTML_SIMPLE,
    SAMPLE_MARKDOWN_TWO_LISTS,
    SAMPLE_HTML_TWO_LISTS,
    SAMPLE_MARKDOWN_ALL_HEADERS,
    SAMPLE_MARKDOWN_MIXED,
    SAMPLE_HTML_MIXED,
)
