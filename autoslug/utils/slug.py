import re
from typing import Any, Optional, Sequence

from unidecode import unidecode

from autoslug.core.config import settings
from autoslug.core.sources import FieldRef, is_blank


def generate_slug(
    text: str,
    separator: Optional[str] = None,
    max_length: Optional[int] = None,
) -> str:
    """Convert text to a URL-safe slug: ascii, lowercase, hyphens, no special chars."""
    if separator is None:
        separator = settings.SLUG_SEPARATOR
    slug = unidecode(str(text)).lower()
    slug = re.sub(r"[^a-z0-9]+", lambda _: separator, slug)
    slug = slug.strip(separator)
    if max_length:
        slug = slug[:max_length].rstrip(separator)
    return slug


def build_slug(sources: Sequence[Any], changeset=None) -> Optional[str]:
    """
    Default slug builder.

    Joins the source values with the configured separator and normalizes the
    result. Field references are resolved against ``changeset`` when one is
    given; without it, sources must already be values.

    Custom builders usually wrap this one:

        def build(sources, changeset):
            return build_slug(sources, changeset).replace("-", "+")
    """
    values = []
    for value in sources:
        if isinstance(value, FieldRef):
            if changeset is None:
                raise TypeError(f"Cannot resolve field {value.name!r} without a changeset")
            value = changeset.get_field(value.name)
        if not is_blank(value):
            values.append(value)

    text = settings.SLUG_SEPARATOR.join(str(value) for value in values)
    return generate_slug(text, max_length=settings.SLUG_MAX_LENGTH)
