from functools import lru_cache
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="GEOCODER_")

    app_name: str = "latlng-geocoder"
    debug: bool = False
    root_path: str = ""
    google_maps_api_key: str | None = None
    # e.g. GEOCODER_GEOCODE_OPTIONS='{"region": "us", "language": "en"}'
    geocode_options: dict[str, Any] = {}
    http_timeout: float = 10.0


@lru_cache
def get_settings() -> Settings:
    return Settings()
