from typing import Any, Callable, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator

from autoslug.core.config import settings


# Registration options for a slug field
class SlugOptions(BaseModel):
    from_: Optional[Union[str, Tuple[str, ...]]] = Field(default=None, alias="from")
    to: str = Field(default_factory=lambda: settings.SLUG_FIELD)
    always_change: bool = False
    slug_builder: Optional[Callable[..., Optional[str]]] = None
    source_resolver: Optional[Callable[..., Any]] = None

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    @model_validator(mode="after")
    def check_sources(self) -> "SlugOptions":
        if self.from_ is None and self.source_resolver is None:
            raise ValueError("a slug field needs either 'from' or a 'source_resolver'")
        return self
