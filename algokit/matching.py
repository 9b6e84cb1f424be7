"""Naive substring search."""

from __future__ import annotations

__all__ = ["find_pattern"]


def find_pattern(text: str, pattern: str) -> list[int]:
    """Every index at which ``pattern`` occurs in ``text``, overlaps included."""
    return [
        i for i in range(len(text) - len(pattern) + 1) if text.startswith(pattern, i)
    ]