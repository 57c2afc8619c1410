from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List, Literal

class Settings(BaseSettings):
    ENV: str = "dev"
    SERVICE_PORT: int = 8080
    MAX_EVENT_SIZE: int = 65536
    LOG_JSON: bool = True
    # Time source selection: "http" or "local"
    TIME_SOURCE: Literal["http", "local"] = "http"
    TIME_SERVICE_URLS: str = ""  # Comma-separated list of time service URLs
    TIME_SERVICE_TIMEOUT: float = 5.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def time_service_urls(self) -> List[str]:
        return [u.strip() for u in self.TIME_SERVICE_URLS.split(",") if u.strip()]

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
