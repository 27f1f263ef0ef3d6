"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Built once at startup and passed to the page store; nothing mutates
    it afterwards.
    """

    repo_dir: Path = Path("data/wiki")
    extension: str = ".md"
    homepage: str = "Home"
    create_repo: bool = True
    author_name: str = "GitWiki"
    author_email: str = "gitwiki@localhost"
    debug: bool = False
    app_title: str = "GitWiki"

    model_config = SettingsConfigDict(
        env_prefix="GITWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )


settings = Settings()
