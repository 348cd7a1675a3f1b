from typing import Any, Callable, List, NamedTuple, Optional, Sequence, Union


class FieldRef(NamedTuple):
    """A slug source that names a field on the mutation record."""

    name: str


# A plain ``str`` token is a literal and is used verbatim.
SourceToken = Union[FieldRef, str]
SourceSpec = Optional[Sequence[SourceToken]]
SourceResolver = Callable[[Any, Any], SourceSpec]


def field(name: str) -> FieldRef:
    return FieldRef(name)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def static_sources(changeset, options) -> List[FieldRef]:
    """Default resolver: the configured ``from`` field(s), in order."""
    source = options.from_
    if source is None:
        return []
    if isinstance(source, str):
        return [FieldRef(source)]
    return [FieldRef(name) for name in source]


def resolve_sources(changeset, sources: SourceSpec) -> List[Any]:
    """
    Turn a source spec into the values fed to the slug builder.

    Field references are read through ``changeset.get_field`` so pending
    changes win over stored values. Blank values are dropped.
    """
    values = []
    for token in sources or ():
        if isinstance(token, FieldRef):
            value = changeset.get_field(token.name)
        elif isinstance(token, str):
            value = token
        else:
            raise TypeError(
                f"Slug source must be a FieldRef or str, got {type(token).__name__}"
            )
        if not is_blank(value):
            values.append(value)
    return values
