"""URL slug helpers for supplier and category names."""

import re
from typing import Callable

_NON_WORD = re.compile(r"[^\w\s-]")
_SEPARATORS = re.compile(r"[\s_-]+")


def create_slug(text: str) -> str:
    """
    Lowercase, hyphen-separated slug.

    Example:
        >>> create_slug("  Acme Fleet & Co. ")
        'acme-fleet-co'
    """
    slug = text.lower().strip()
    slug = _NON_WORD.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-")


def unique_slug(base: str, exists: Callable[[str], bool]) -> str:
    """First of ``base``, ``base-1``, ``base-2``... for which ``exists`` is False."""
    slug = base
    counter = 1
    while exists(slug):
        slug = f"{base}-{counter}"
        counter += 1
    return slug
