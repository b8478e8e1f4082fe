"""Filename helpers for generated output."""

from __future__ import annotations

import re

_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")

FALLBACK_SLUG = "component"


def slugify(title: str) -> str:
    """
    Turn a component title into a filesystem-safe stem.

    >>> slugify("  Primary Button -- Large! ")
    'primary-button-large'
    """
    slug = title.lower()
    slug = _INVALID_CHARS.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def component_filename(title: str, type_: str, sequence_id: int | None = None) -> str:
    """Build ``slug(title)[-sequence_id].type``; empty slugs fall back to ``component``."""
    stem = slugify(title) or FALLBACK_SLUG
    if sequence_id is not None:
        stem = f"{stem}-{sequence_id}"
    return f"{stem}.{type_}"
