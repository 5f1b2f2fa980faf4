"""Conversion result data model."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ConversionResult:
    """Result of markdown to HTML conversion.

    Contains the HTML fragment along with per-document statistics and
    warnings about output that is not valid HTML (e.g. header levels
    above 6). Warnings never change the HTML.

    Attributes:
        html: Converted HTML fragment
        source: Where the markdown came from (file path), if known
        line_count: Number of lines converted
        header_count: Number of <hN> fragments emitted
        list_item_count: Number of <li> fragments emitted
        paragraph_count: Number of <p> fragments emitted
        list_count: Number of <ul> wrappers emitted
        warnings: Human-readable warnings, one per affected line
    """
    html: str
    source: Optional[str] = None
    line_count: int = 0
    header_count: int = 0
    list_item_count: int = 0
    paragraph_count: int = 0
    list_count: int = 0
    warnings: List[str] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """True if the conversion produced any warnings."""
        return bool(self.warnings)
