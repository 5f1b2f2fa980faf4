"""Content conversion module for markdown → HTML conversion.

This module provides the MarkdownConverter and the plain `convert`
function for turning a small markdown subset (headers, unordered list
items, bold/italic emphasis, paragraphs) into an HTML fragment.
"""

from .emphasis import apply_emphasis
from .line_classifier import render_line
from .markdown_converter import MarkdownConverter, convert

__all__ = ['MarkdownConverter', 'apply_emphasis', 'convert', 'render_line']
