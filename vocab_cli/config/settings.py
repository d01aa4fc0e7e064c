"""Configuration management with Pydantic v2 settings style"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.vocab_entry import Locale

DEFAULT_DATA_FILENAME = ".vocab_data.json"


def default_data_file() -> Path:
    """Location of the vocabulary file in the user's home directory"""
    return Path.home() / DEFAULT_DATA_FILENAME


class StorageSettings(BaseSettings):
    """Vocabulary storage settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    data_file: Path = Field(
        default_factory=default_data_file,
        validation_alias=AliasChoices("VOCAB_DATA_FILE"),
    )

    @field_validator("data_file")
    @classmethod
    def expand_user(cls, v: Path | str) -> Path:
        """Expand ~ in user-supplied paths"""
        return Path(v).expanduser()


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    level: str = Field(default="WARNING", validation_alias=AliasChoices("LOG_LEVEL"))
    file: Path | None = Field(default=None, validation_alias=AliasChoices("LOG_FILE"))

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


class AppSettings(BaseSettings):
    """Main application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_nested_delimiter="__", case_sensitive=False, extra="ignore"
    )

    storage: StorageSettings = Field(default_factory=StorageSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    default_lang: Locale = Field(
        default=Locale.EN, validation_alias=AliasChoices("VOCAB_LANG")
    )
    debug: bool = Field(default=False, validation_alias=AliasChoices("DEBUG"))

    @field_validator("default_lang", mode="before")
    @classmethod
    def normalize_lang(cls, v: object) -> object:
        """Accept locale codes in any case"""
        if isinstance(v, str):
            return v.strip().lower()
        return v


# Global settings instance
settings = AppSettings()
