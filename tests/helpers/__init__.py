"""Test helper modules for converter testing.

This package provides utilities for unit and integration testing:
- assertion_helpers: Structural assertions on HTML fragments
"""

from .assertion_helpers import (
    assert_list_wrappers_balanced,
    list_items_per_wrapper,
    parse_fragment,
    top_level_tags,
)

__all__ = [
    'assert_list_wrappers_balanced',
    'list_items_per_wrapper',
    'parse_fragment',
    'top_level_tags',
]
