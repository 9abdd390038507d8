"""Output formatting utilities."""

from .formatters import format_error, format_key_value, format_success, sanitize_dict
from .json_output import json_output

__all__ = [
    "format_error",
    "format_key_value",
    "format_success",
    "json_output",
    "sanitize_dict",
]
