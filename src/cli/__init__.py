"""Command-line interface for the markdown to HTML converter.

This package provides the `mdlite` CLI tool that converts markdown read
from stdin or files into HTML fragments, with YAML configuration,
progress indication and error handling.
"""

from .convert_command import ConvertCommand
