"""Pydantic models for sigcodec."""

from __future__ import annotations

from .report import SizeReport

__all__ = [
    "SizeReport",
]
