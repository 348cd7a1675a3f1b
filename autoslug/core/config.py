from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "autoslug"

    # Slug generation defaults
    SLUG_FIELD: str = "slug"
    SLUG_SEPARATOR: str = "-"
    SLUG_MAX_LENGTH: Optional[int] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


settings = Settings()
