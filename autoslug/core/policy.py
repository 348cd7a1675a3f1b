import enum

from autoslug.core.sources import is_blank


class GenerationDecision(str, enum.Enum):
    GENERATE = "generate"
    SKIP = "skip"


def decide(changeset, target_field: str, always_change: bool = False) -> GenerationDecision:
    """
    Decide whether the slug in ``target_field`` should be (re)computed.

    Slugs are stable identifiers: once set they are kept unless
    ``always_change`` is requested. Source fields are not inspected.
    """
    if always_change:
        return GenerationDecision.GENERATE
    if is_blank(changeset.get_field(target_field)):
        return GenerationDecision.GENERATE
    return GenerationDecision.SKIP
