"""Data models for CLI operations.

This module defines all data models used by the CLI module.
All models use dataclasses for clean, type-safe data structures,
following the patterns established in src/models/conversion_result.py.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): All inputs converted (skipped outputs do not count as failures)
    - GENERAL_ERROR (1): Invalid option combination or unexpected error
    - CONFIG_ERROR (2): Configuration file missing or invalid
    - FILESYSTEM_ERROR (3): At least one input could not be read or written

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 2
    FILESYSTEM_ERROR = 3


@dataclass
class ConverterConfig:
    """Converter settings loaded from .mdlite/config.yaml.

    Attributes:
        encoding: Text encoding for reading inputs and writing outputs
        output_suffix: Suffix replacing the input suffix for output files
        output_dir: Default directory for output files (None = beside the input)
        overwrite: Replace existing output files instead of skipping them

    Example:
        >>> config = ConverterConfig(output_dir="./site")
        >>> config = ConverterConfig()  # All defaults
    """
    encoding: str = "utf-8"
    output_suffix: str = ".html"
    output_dir: Optional[str] = None
    overwrite: bool = False


@dataclass
class ConvertSummary:
    """Summary of a batch conversion run.

    Attributes:
        converted: Input paths converted successfully
        skipped: Input paths skipped because their output already existed
        failed: Input paths that could not be read or written
        warning_count: Total converter warnings across all inputs
    """
    converted: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    warning_count: int = 0

    @property
    def total(self) -> int:
        """Number of inputs processed."""
        return len(self.converted) + len(self.skipped) + len(self.failed)
