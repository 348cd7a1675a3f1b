from typing import Any, Dict, List, NamedTuple, Optional


class FieldError(NamedTuple):
    field: str
    message: str
    constraint: Optional[str] = None


class UniqueConstraint(NamedTuple):
    field: str
    name: str
    message: str


class Changeset:
    """
    In-memory mutation record: stored values plus proposed changes.

    ``current`` holds the values as stored, ``pending`` only the fields
    being changed. Reads go through :meth:`get_field`, so a pending change
    always wins over the stored value.
    """

    def __init__(self, current: Optional[Dict[str, Any]] = None, pending: Optional[Dict[str, Any]] = None):
        self._current = dict(current or {})
        self._pending = dict(pending or {})
        self.errors: List[FieldError] = []
        self.constraints: List[UniqueConstraint] = []

    @property
    def current(self) -> Dict[str, Any]:
        return dict(self._current)

    @property
    def pending(self) -> Dict[str, Any]:
        return dict(self._pending)

    @property
    def valid(self) -> bool:
        return not self.errors

    def get_field(self, name: str, default: Any = None) -> Any:
        if name in self._pending:
            return self._pending[name]
        return self._current.get(name, default)

    def field_changed(self, name: str) -> bool:
        return name in self._pending

    def put_field(self, name: str, value: Any) -> "Changeset":
        self._pending[name] = value
        return self

    def add_error(self, field: str, message: str, constraint: Optional[str] = None) -> "Changeset":
        self.errors.append(FieldError(field, message, constraint))
        return self

    def unique_constraint(self, field: str, name: Optional[str] = None, message: str = "has already been taken") -> "Changeset":
        """Request a uniqueness check on ``field``; the storage layer enforces it."""
        self.constraints.append(UniqueConstraint(field, name or f"{field}_unique", message))
        return self

    def apply_changes(self) -> Dict[str, Any]:
        return {**self._current, **self._pending}

    def __repr__(self) -> str:
        return f"Changeset(pending={self._pending!r}, errors={self.errors!r}, valid={self.valid})"
