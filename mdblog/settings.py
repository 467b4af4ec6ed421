from pathlib import Path
from typing import Literal, Optional

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

    # Storage
    POSTS_DIR: str = "posts"
    PUBLIC_DIR: str = "public"
    UPLOADS_SUBDIR: str = "pictures"

    # Rendering
    TEMPLATES_DIR: Optional[str] = None
    CODE_HIGHLIGHT_STYLE: str = "dracula"

    # Posts
    SLUG_COLLISION: Literal["suffix", "reject", "overwrite"] = "suffix"

    # Blog
    BLOG_TITLE: str = "My Blog"
    BLOG_AUTHOR_NAME: str = ""
    BLOG_AUTHOR_EMAIL: str = ""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3030

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIR)

    @property
    def public_path(self) -> Path:
        return Path(self.PUBLIC_DIR)

    @property
    def uploads_path(self) -> Path:
        return self.public_path / self.UPLOADS_SUBDIR

    @property
    def uploads_url(self) -> str:
        return f"/public/{self.UPLOADS_SUBDIR}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
