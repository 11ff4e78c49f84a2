"""Configuration management using Pydantic Settings."""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="LITSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Term extraction defaults
    default_language: str = Field("english", description="Stopword list used when none is given")
    min_freq: int = Field(2, ge=1)
    min_n: int = Field(2, ge=1)
    max_n: int = Field(5, ge=1)
    keyword_separator: str = Field(";", min_length=1)

    # Network defaults
    min_studies: int = Field(2, ge=1)
    min_occ: int = Field(2, ge=1)

    # Cutoff defaults
    cutoff_percent: float = Field(0.8, gt=0, le=1)
    knot_num: int = Field(3, ge=1)

    # Recall checking
    recall_threshold: float = Field(0.85, ge=0, le=1)

    # Directories
    output_dir: Path = Field(Path("output"))

    # Logging
    log_level: str = Field("INFO")
    log_format: str = Field("json", pattern="^(json|text)$")


# Instantiate global settings
settings = Settings()
