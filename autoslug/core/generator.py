import logging

from autoslug.core.policy import GenerationDecision, decide
from autoslug.core.sources import resolve_sources

logger = logging.getLogger(__name__)


def maybe_generate_slug(changeset, slug_field, force: bool = False):
    """
    Generate the slug for ``slug_field`` on ``changeset`` when needed.

    The changeset is returned unchanged when the slug is already set (and
    neither ``always_change`` nor ``force`` applies), when there is nothing
    to build the slug from, or when the builder returns an empty value.
    Errors raised by the resolver or builder are not caught.
    """
    target = slug_field.target_field
    always_change = slug_field.always_change or force

    if decide(changeset, target, always_change) is GenerationDecision.SKIP:
        logger.debug("Slug field %r already set, skipping.", target)
        return changeset

    sources = resolve_sources(changeset, slug_field.get_sources(changeset))
    if not sources:
        logger.debug("No sources for slug field %r, skipping.", target)
        return changeset

    slug = slug_field.build_slug(sources, changeset)
    if not slug:
        logger.debug("Builder returned an empty slug for %r, skipping.", target)
        return changeset

    logger.debug("Generated slug %r for field %r.", slug, target)
    return changeset.put_field(target, slug)
