"""Utility functions for sigcodec.

This module provides the length arithmetic shared by the encoder and decoder.
"""

from __future__ import annotations

from .sizing import decoded_length, encoded_length, size_report

__all__ = [
    "encoded_length",
    "decoded_length",
    "size_report",
]
