#!/usr/bin/env python3
"""
Tag Normalization

Tags are short lowercase labels. Normalization is all-or-nothing: one invalid
tag rejects the whole input.
"""

import re
from collections.abc import Iterable

from .errors import InvalidTagError

TAG_PATTERN = re.compile(r"^[a-z0-9_-]{1,24}$")

Tags = frozenset[str]

EMPTY_TAGS: Tags = frozenset()


def normalize_tags(values: Iterable[str]) -> Tags:
    """
    Trim, lowercase, drop empties, de-duplicate and validate tags.

    Args:
        values: Raw tag strings

    Returns:
        Frozen set of normalized tags

    Raises:
        InvalidTagError: If any non-empty tag fails validation

    Examples:
        normalize_tags([" Coffee ", "coffee", ""]) -> frozenset({"coffee"})
        normalize_tags(["has space"]) -> InvalidTagError
    """
    if isinstance(values, str):
        raise InvalidTagError("Tags must be an iterable of strings, not a single string")
    normalized = set()
    for value in values:
        tag = str(value).strip().lower()
        if not tag:
            continue
        if not TAG_PATTERN.match(tag):
            raise InvalidTagError(f"Invalid tag {tag!r}")
        normalized.add(tag)
    return frozenset(normalized)


def parse_tag_list(text: str, separator: str = ";") -> Tags:
    """Split a separator-joined tag string and normalize it."""
    return normalize_tags(part for part in text.split(separator) if part.strip())


def join_tags(tags: Iterable[str], separator: str = ";") -> str:
    """Join tags in sorted order so output is deterministic."""
    return separator.join(sorted(tags))
