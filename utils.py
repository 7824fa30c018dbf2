"""
Utility functions for the application.
"""
import random
from typing import Optional

from flask import current_app
from slugify import slugify

from models import Blog

# Used when a title has no characters that survive slugification
FALLBACK_SLUG = 'blog'


def make_slug(title: str) -> str:
    """
    Lowercase, URL-safe slug for a title.

    Examples:
        >>> make_slug('Hello World')
        'hello-world'
        >>> make_slug('!!!')
        'blog'
    """
    return slugify(title or '', lowercase=True) or FALLBACK_SLUG


def clean_text(value) -> str:
    """Stripped string, or '' for anything that is not a string."""
    return value.strip() if isinstance(value, str) else ''


def slug_exists(slug: str) -> bool:
    return Blog.query.filter_by(slug=slug).first() is not None


def generate_unique_slug(title: str) -> str:
    """
    Slug for ``title`` that no stored blog uses yet.

    Tries the bare slug, then ``<slug>-1``, ``<slug>-2`` and so on, with one
    lookup per candidate.
    """
    base_slug = make_slug(title)
    slug = base_slug
    count = 1
    while slug_exists(slug):
        slug = f"{base_slug}-{count}"
        count += 1
    return slug


def pick_placeholder_image() -> Optional[str]:
    """Random placeholder for posts without an image."""
    images = current_app.config.get('PLACEHOLDER_IMAGES') or []
    return random.choice(images) if images else None


def parse_integer(value_str: str, default: Optional[int] = None) -> Optional[int]:
    """
    Parse integer value.

    Args:
        value_str: Integer string to parse
        default: Default value to return if parsing fails (default: None)

    Returns:
        Parsed integer value or default if parsing fails

    Examples:
        >>> parse_integer('42')
        42
        >>> parse_integer('invalid')
        None
    """
    if not value_str or not value_str.strip():
        return default

    value_str = value_str.strip()

    try:
        return int(value_str)
    except ValueError:
        return default


def parse_positive_integer(value_str: str, default: int, maximum: Optional[int] = None) -> int:
    """Like parse_integer, but falls back to ``default`` for values below 1 and caps at ``maximum``."""
    value = parse_integer(value_str, default)
    if value < 1:
        return default
    if maximum is not None:
        value = min(value, maximum)
    return value
