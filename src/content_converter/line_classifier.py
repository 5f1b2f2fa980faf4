"""Classification and rendering of a single markdown line.

Each rule returns an HTML fragment, or None when the line is not of its
kind. Rules are tried in priority order: header, then list item; the
paragraph rule is the fallback and always renders.
"""

from typing import Callable, Optional, Tuple

from .emphasis import apply_emphasis

LIST_ITEM_PREFIX = '* '
HEADER_MARKER = '#'


def count_header_level(line: str) -> int:
    """Count the leading '#' characters of a line."""
    return len(line) - len(line.lstrip(HEADER_MARKER))


def render_header(line: str) -> Optional[str]:
    """Render a header line, or return None if the line has no leading '#'.

    The character directly after the hashes is dropped (conventionally the
    separating space) and the rest is stripped. A line made only of hashes
    renders as an empty header. Levels above 6 are emitted as-is.
    """
    level = count_header_level(line)
    if level == 0:
        return None

    content = line[level + 1:].strip()
    return f'<h{level}>{content}</h{level}>'


def render_list_item(line: str) -> Optional[str]:
    """Render a '* ' prefixed line as a list item, or return None."""
    if not line.startswith(LIST_ITEM_PREFIX):
        return None

    content = apply_emphasis(line[len(LIST_ITEM_PREFIX):])
    return f'<li>{content}</li>'


def render_paragraph(line: str) -> str:
    """Render any line as a paragraph."""
    return f'<p>{apply_emphasis(line)}</p>'


# Header takes priority over list item
LINE_RULES: Tuple[Callable[[str], Optional[str]], ...] = (
    render_header,
    render_list_item,
)


def render_line(line: str) -> str:
    """Render one markdown line to an HTML fragment.

    Args:
        line: Raw line (no trailing newline)

    Returns:
        One of <hN>...</hN>, <li>...</li> or <p>...</p>
    """
    for rule in LINE_RULES:
        fragment = rule(line)
        if fragment is not None:
            return fragment

    return render_paragraph(line)
