"""
Slug and list-field helpers shared by the admin forms.

Dependencies: re (stdlib)
System role: URL slug generation
"""

import re

from tourbook.core.exceptions import ValidationError

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def generate_slug(text: str) -> str:
    """
    Derive a URL slug from a display name.

    Lowercases the text, collapses every run of characters outside
    ``[a-z0-9]`` into a single hyphen and trims hyphens from both ends.

    Args:
        text: Name or title to slugify

    Returns:
        str: Slug such as ``museums-galleries``

    Raises:
        ValidationError: If nothing slug-worthy remains
    """
    slug = _NON_ALNUM.sub("-", (text or "").lower()).strip("-")
    if not slug:
        raise ValidationError(f"Cannot derive a slug from {text!r}", field="slug")
    return slug


def resolve_slug(slug: str | None, source: str) -> str:
    """Use the explicit slug when given, otherwise generate one from ``source``."""
    if slug and slug.strip():
        return generate_slug(slug)
    return generate_slug(source)


def split_languages(value: str | list[str] | None) -> list[str]:
    """
    Normalize a languages field to a clean list.

    Accepts the comma-separated text the admin form submits
    (``"English, German"``) or an already-split list.
    """
    if value is None:
        return []
    parts = value.split(",") if isinstance(value, str) else value
    return [part.strip() for part in parts if part and part.strip()]
