"""Markdown to HTML converter.

This module assembles the HTML fragment for a whole document. Lines are
rendered one at a time by the line classifier, and consecutive list items
are wrapped in a single <ul>...</ul> pair. The assembly is a fold over the
rendered fragments carrying the output so far and whether a list is open.
"""

import logging
from functools import reduce
from typing import List, NamedTuple, Optional

from src.models.conversion_result import ConversionResult

from .line_classifier import count_header_level, render_line

logger = logging.getLogger(__name__)

LIST_OPEN_TAG = '<ul>'
LIST_CLOSE_TAG = '</ul>'
LIST_ITEM_TAG = '<li>'
PARAGRAPH_TAG = '<p>'

# HTML only defines <h1> through <h6>
MAX_HTML_HEADER_LEVEL = 6


class _AssemblyState(NamedTuple):
    """Fold state: emitted pieces and whether a <ul> is open."""
    output: List[str]
    list_open: bool


def split_lines(markdown: str) -> List[str]:
    """Split a document on '\\n', dropping trailing empty lines.

    Carriage returns are not stripped. Empty lines in the middle of the
    document are kept (they render as empty paragraphs).
    """
    lines = markdown.split('\n')
    while lines and lines[-1] == '':
        lines.pop()
    return lines


def _step(state: _AssemblyState, fragment: str) -> _AssemblyState:
    """Append one fragment, opening or closing the list wrapper as needed."""
    is_list_item = fragment.startswith(LIST_ITEM_TAG)
    list_open = state.list_open

    if is_list_item and not list_open:
        state.output.append(LIST_OPEN_TAG)
        list_open = True
    elif not is_list_item and list_open:
        state.output.append(LIST_CLOSE_TAG)
        list_open = False

    state.output.append(fragment)
    return _AssemblyState(state.output, list_open)


def assemble(fragments: List[str]) -> str:
    """Join rendered fragments, wrapping runs of <li> in <ul>...</ul>."""
    final = reduce(_step, fragments, _AssemblyState([], False))

    if final.list_open:
        final.output.append(LIST_CLOSE_TAG)
    return ''.join(final.output)


def convert(markdown: str) -> str:
    """Convert a markdown document to an HTML fragment.

    Args:
        markdown: Full document text

    Returns:
        HTML fragment (no <html>/<body> wrapper). Empty input yields ''.

    Example:
        >>> convert("# Header\\n* Item 1\\n* Item 2\\nParagraph text")
        '<h1>Header</h1><ul><li>Item 1</li><li>Item 2</li></ul><p>Paragraph text</p>'
    """
    return assemble([render_line(line) for line in split_lines(markdown)])


class MarkdownConverter:
    """Converts markdown documents to HTML fragments.

    Supports headers (#), unordered list items (* ), bold (__text__),
    italic (_text_) and plain paragraphs. Input characters are not
    HTML-escaped.

    Example:
        >>> converter = MarkdownConverter()
        >>> converter.markdown_to_html("* __Bold Item__")
        '<ul><li><strong>Bold Item</strong></li></ul>'
    """

    def markdown_to_html(self, markdown: str) -> str:
        """Convert markdown to an HTML fragment.

        Args:
            markdown: Markdown string

        Returns:
            HTML fragment string
        """
        if not markdown:
            return ""

        return convert(markdown)

    def convert_document(
        self,
        markdown: str,
        source: Optional[str] = None
    ) -> ConversionResult:
        """Convert markdown and collect statistics and warnings.

        Args:
            markdown: Markdown string
            source: Optional origin of the markdown (used in log messages)

        Returns:
            ConversionResult whose html equals markdown_to_html(markdown)
        """
        lines = split_lines(markdown)
        fragments = [render_line(line) for line in lines]
        html = assemble(fragments)

        result = ConversionResult(
            html=html,
            source=source,
            line_count=len(lines),
        )

        previous_was_item = False
        for line_number, (line, fragment) in enumerate(zip(lines, fragments), start=1):
            is_list_item = fragment.startswith(LIST_ITEM_TAG)
            if is_list_item and not previous_was_item:
                result.list_count += 1
            previous_was_item = is_list_item

            if is_list_item:
                result.list_item_count += 1
            elif fragment.startswith(PARAGRAPH_TAG):
                result.paragraph_count += 1
            else:
                result.header_count += 1
                level = count_header_level(line)
                if level > MAX_HTML_HEADER_LEVEL:
                    result.warnings.append(
                        f"Line {line_number}: header level {level} is not valid HTML "
                        f"(emitted <h{level}>)"
                    )

        logger.debug(
            f"Converted {source or '<string>'}: {result.line_count} line(s), "
            f"{result.header_count} header(s), {result.list_item_count} list item(s) "
            f"in {result.list_count} list(s), {result.paragraph_count} paragraph(s)"
        )
        for warning in result.warnings:
            logger.warning(f"{source or '<string>'}: {warning}")

        return result
