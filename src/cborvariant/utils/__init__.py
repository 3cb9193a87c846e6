"""Utility functions for cborvariant.

This module provides the file loading helper and size calculation.
"""

from __future__ import annotations

from .io import read_file
from .sizing import encoded_size, header_size

__all__ = [
    "read_file",
    "encoded_size",
    "header_size",
]
