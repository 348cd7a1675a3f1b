from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class SlugType(TypeDecorator):
    """String column for slug values, e.g. ``Column(SlugType(255), unique=True)``."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None or isinstance(value, str):
            return value
        raise TypeError(f"Slug value must be a str, got {type(value).__name__}")

    def process_result_value(self, value, dialect):
        return value
