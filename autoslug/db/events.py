import logging

from sqlalchemy import event

from autoslug.core.field import SlugField
from autoslug.db.changeset import ModelChangeset

logger = logging.getLogger(__name__)


def track_slug(model, field: SlugField):
    """
    Generate ``field`` on every insert and update of ``model`` and its
    mapped subclasses.

    Returns the listener so it can be passed to :func:`untrack_slug`.
    """

    def listener(mapper, connection, target):
        field.maybe_generate_slug(ModelChangeset(target))

    event.listen(model, "before_insert", listener, propagate=True)
    event.listen(model, "before_update", listener, propagate=True)
    logger.info(f"Tracking slug field {field.target_field!r} on {model.__name__}.")
    return listener


def untrack_slug(model, listener) -> None:
    event.remove(model, "before_insert", listener)
    event.remove(model, "before_update", listener)
