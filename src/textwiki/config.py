"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    templates_dir: Path | None = None
    front_page: str = "FrontPage"
    default_scheme: str = "http://"
    app_title: str = "TextWiki"
    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TEXTWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
