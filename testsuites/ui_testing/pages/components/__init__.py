"""Reusable page components."""

from .header import Header

__all__ = [
    "Header",
]
