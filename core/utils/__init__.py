"""Formatting utilities"""

from core.utils.formatting import format_value

__all__ = ["format_value"]
