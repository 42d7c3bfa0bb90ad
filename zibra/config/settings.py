"""Configuration management for the ZIBA support engine."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGED_RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ZIBRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Corpus location (defaults to the packaged resources)
    corpus_dir: Path | None = None
    templates_file: str = "templates.json"
    help_articles_file: str = "driver_help.json"
    synonyms_file: str = "synonyms.json"

    # Matching settings
    default_priority: int = 50
    require_catch_all: bool = False
    search_result_limit: int = 8
    search_fallback_limit: int = 3

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    debug: bool = False

    @field_validator("search_result_limit", "search_fallback_limit", mode="after")
    @classmethod
    def limits_positive(cls, value: int) -> int:
        """Result limits must allow at least one document."""
        if value < 1:
            raise ValueError("result limits must be at least 1")
        return value

    @field_validator("templates_file", "help_articles_file", "synonyms_file", mode="after")
    @classmethod
    def strip_file_names(cls, value: str) -> str:
        """Remove BOM and whitespace from configured file names."""
        return value.lstrip("\ufeff").strip()

    @property
    def resolved_corpus_dir(self) -> Path:
        """Directory the corpus files are read from."""
        return self.corpus_dir or PACKAGED_RESOURCES_DIR

    @property
    def templates_path(self) -> Path:
        return self.resolved_corpus_dir / self.templates_file

    @property
    def help_articles_path(self) -> Path:
        return self.resolved_corpus_dir / self.help_articles_file

    @property
    def synonyms_path(self) -> Path:
        return self.resolved_corpus_dir / self.synonyms_file


# Global settings instance
settings = Settings()
