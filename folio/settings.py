from pathlib import Path
from typing import List

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
    SITE_URL: str = "https://www.pproenca.dev"
    SITE_NAME: str = "pproenca.dev"
    SITE_TITLE: str = "pproenca.dev"
    SITE_DESCRIPTION: str = "A personal blog about web development and technology."
    SITE_LOCALE: str = "en_US"
    SITE_LANGUAGE: str = "en"

    # Author
    AUTHOR_NAME: str = "Pedro Proenca"
    AUTHOR_URL: str = "https://www.pproenca.dev/about"
    AUTHOR_TWITTER: str = "@ThePedroProenca"
    AUTHOR_GITHUB: str = "https://github.com/pproenca"
    AUTHOR_LINKEDIN: str = "https://www.linkedin.com/in/pedro-proenca/"

    # Content
    CONTENT_DIR: str = "content"
    POSTS_SUBDIR: str = "posts"
    CONTENT_EXTENSION: str = ".mdx"
    PAGE_INDEX_NAME: str = "index"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Push notifications (empty disables the subscribe button)
    ONESIGNAL_APP_ID: str = ""

    # Robots
    ROBOTS_DISALLOW: List[str] = ["/api/"]

    @property
    def content_root(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def posts_dir(self) -> Path:
        return self.content_root / self.POSTS_SUBDIR

    @property
    def site_url(self) -> str:
        return self.SITE_URL.rstrip("/")


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings
