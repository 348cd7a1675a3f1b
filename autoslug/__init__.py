from autoslug.core.field import SlugField, slug_field
from autoslug.core.generator import maybe_generate_slug
from autoslug.core.policy import GenerationDecision, decide
from autoslug.core.sources import FieldRef, field, resolve_sources, static_sources
from autoslug.models.changeset import Changeset
from autoslug.schemas.options import SlugOptions
from autoslug.utils.slug import build_slug, generate_slug

__all__ = [
    "Changeset",
    "FieldRef",
    "GenerationDecision",
    "SlugField",
    "SlugOptions",
    "build_slug",
    "decide",
    "field",
    "generate_slug",
    "maybe_generate_slug",
    "resolve_sources",
    "slug_field",
    "static_sources",
]
