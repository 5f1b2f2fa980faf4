"""Data models for conversion results."""

from src.models.conversion_result import ConversionResult

__all__ = ['ConversionResult']
