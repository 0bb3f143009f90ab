from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Site
    SITE_TITLE: str = "Somedave"

    # Blog content
    POSTS_DIR: Path = Path("posts")
    RECENT_POSTS_LIMIT: int = 5

    # Logging
    LOG_LEVEL: str = "INFO"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
