import logging
from typing import Any, Dict

from sqlalchemy import and_, inspect, not_
from sqlalchemy.orm import Session

from autoslug.models.changeset import Changeset

logger = logging.getLogger(__name__)


class ModelChangeset(Changeset):
    """
    Mutation record backed by a mapped SQLAlchemy instance.

    Pending changes are the column attributes whose history has changes;
    unchanged attributes are read through the instance, loading them if
    the session expired them. ``put_field`` sets the attribute so the next flush writes it.
    """

    def __init__(self, instance):
        super().__init__()
        self.instance = instance
        self.state = inspect(instance)

    def _column_attrs(self):
        for prop in self.state.mapper.column_attrs:
            yield self.state.attrs[prop.key]

    @property
    def current(self) -> Dict[str, Any]:
        values = {}
        for attr in self._column_attrs():
            history = attr.history
            if history.has_changes():
                values[attr.key] = history.deleted[0] if history.deleted else None
            else:
                values[attr.key] = attr.value
        return values

    @property
    def pending(self) -> Dict[str, Any]:
        return {attr.key: attr.value for attr in self._column_attrs() if attr.history.has_changes()}

    def get_field(self, name: str, default: Any = None) -> Any:
        return getattr(self.instance, name, default)

    def field_changed(self, name: str) -> bool:
        return name in self.state.attrs and self.state.attrs[name].history.has_changes()

    def put_field(self, name: str, value: Any) -> "ModelChangeset":
        setattr(self.instance, name, value)
        return self

    def apply_changes(self) -> Dict[str, Any]:
        return {attr.key: attr.value for attr in self._column_attrs()}

    def validate(self, db: Session) -> bool:
        """Check attached unique constraints against the database."""
        model = self.state.mapper.class_
        with db.no_autoflush:
            for constraint in self.constraints:
                value = self.get_field(constraint.field)
                if value is None:
                    continue
                query = db.query(model).filter(getattr(model, constraint.field) == value)
                if self.state.identity is not None:
                    own_key = [col == key for col, key in zip(self.state.mapper.primary_key, self.state.identity)]
                    query = query.filter(not_(and_(*own_key)))
                if query.first() is not None:
                    logger.warning(
                        "Unique constraint %s failed for %s.%s=%r",
                        constraint.name, model.__name__, constraint.field, value,
                    )
                    self.add_error(constraint.field, constraint.message, constraint.name)
        return self.valid
