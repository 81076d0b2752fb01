"""Container storage helpers.

This module converts encoded text to and from the byte form used by class
file constant pool strings.
"""

from __future__ import annotations

from .mutf8 import from_mutf8, to_mutf8

__all__ = [
    "to_mutf8",
    "from_mutf8",
]
