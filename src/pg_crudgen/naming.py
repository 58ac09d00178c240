"""Identifier case helpers."""

from __future__ import annotations

import re

_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def split_words(value: str) -> list[str]:
    return _WORD.findall(value)


def pascal_case(value: str) -> str:
    """Convert ``user_accounts`` or ``userAccounts`` to ``UserAccounts``."""
    return "".join(word.capitalize() for word in split_words(value))
