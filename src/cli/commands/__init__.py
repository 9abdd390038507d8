"""CLI commands."""

from . import check, show

__all__ = ["check", "show"]
