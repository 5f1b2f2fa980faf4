"""Inline emphasis substitution for line content.

Bold (``__text__``) is rewritten first, then italic (``_text_``) on the
result. Each pass performs at most one substitution and the capture is
greedy, so several spans on one line collapse into a single span running
from the first marker to the last one.
"""

import re

BOLD_PATTERN = re.compile(r'__(.+)__')
ITALIC_PATTERN = re.compile(r'_(.+)_')


def apply_emphasis(text: str) -> str:
    """Rewrite bold and italic markers into inline HTML tags.

    Args:
        text: Line content (without any list marker)

    Returns:
        Text with at most one <strong> and at most one <em> span inserted.
        Other characters pass through unescaped.

    Example:
        >>> apply_emphasis("a _test_ with __bold__")
        'a <em>test</em> with <strong>bold</strong>'
    """
    result = BOLD_PATTERN.sub(r'<strong>\1</strong>', text, count=1)
    return ITALIC_PATTERN.sub(r'<em>\1</em>', result, count=1)
