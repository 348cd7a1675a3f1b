from dataclasses import dataclass
from typing import Any, Optional, Sequence

from autoslug.core.generator import maybe_generate_slug
from autoslug.core.sources import SourceSpec, static_sources
from autoslug.schemas.options import SlugOptions
from autoslug.utils.slug import build_slug


@dataclass(frozen=True)
class SlugField:
    """
    Wiring for one auto-generated slug field.

    Create it once with :func:`slug_field` and share it; it holds no
    per-record state.

        title_slug = slug_field(from_="title", to="slug")
        changeset = title_slug.maybe_generate_slug(changeset)

    ``source_resolver(changeset, options)`` may return field references
    (:class:`~autoslug.core.sources.FieldRef`) and literal strings, or
    ``None`` to skip. ``slug_builder(sources, changeset)`` receives the
    resolved, non-blank values and returns the slug or ``None``/``""`` to
    leave the field alone.

    A ``source_resolver`` overrides ``from``: when both are given the
    resolver is called and ``from`` is only visible to it through the
    options it receives.
    """

    options: SlugOptions

    @property
    def target_field(self) -> str:
        return self.options.to

    @property
    def always_change(self) -> bool:
        return self.options.always_change

    def get_sources(self, changeset) -> SourceSpec:
        resolver = self.options.source_resolver or static_sources
        return resolver(changeset, self.options)

    def build_slug(self, sources: Sequence[Any], changeset=None) -> Optional[str]:
        builder = self.options.slug_builder or build_slug
        return builder(sources, changeset)

    def maybe_generate_slug(self, changeset):
        return maybe_generate_slug(changeset, self)

    def force_generate_slug(self, changeset):
        """Regenerate the slug for this changeset even if it is already set."""
        return maybe_generate_slug(changeset, self, force=True)

    def unique_constraint(self, changeset, **opts):
        return changeset.unique_constraint(self.target_field, **opts)


def slug_field(**options) -> SlugField:
    """Build a :class:`SlugField`; pass ``from`` as ``from_`` or ``**{"from": ...}``."""
    return SlugField(SlugOptions(**options))
