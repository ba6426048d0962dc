"""Настройки приложения (env + `.env`)."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pydantic-настройки (всё, что обычно лежит в `.env`)."""
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = Field(default="local", validation_alias="APP_ENV")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Общий секрет HMAC: один на процесс, без ротации.
    hmac_secret: str = Field(default="hmac", min_length=1, validation_alias="HMAC_SECRET")

    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8080, validation_alias="PORT")


_settings: Settings | None = None


def get_settings() -> Settings:
    """Ленивая загрузка настроек (один раз на процесс)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
