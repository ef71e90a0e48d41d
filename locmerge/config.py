import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

_KNOWN_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LOCMERGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Languages
    default_language: str = "English"
    languages: list[str] = [
        "English",
        "Français",
        "Deutsch",
        "Español",
        "Русский",
        "简体中文",
    ]

    # Table discovery
    plugins_root: str = ""
    relative_table_path: str = "MCM/languages.csv"
    table_encoding: str = "utf-8-sig"

    # Diagnostics
    log_prefix: str = "[locmerge]"
    log_level: str = "INFO"


settings = Settings()

_log = logging.getLogger(__name__)
if settings.default_language not in settings.languages:
    _log.warning(
        "LOCMERGE_DEFAULT_LANGUAGE=%s is not one of LOCMERGE_LANGUAGES; "
        "lookups will not fall back to it.",
        settings.default_language,
    )
if settings.log_level.upper() not in _KNOWN_LOG_LEVELS:
    _log.warning("Unknown LOCMERGE_LOG_LEVEL %r, using INFO.", settings.log_level)
