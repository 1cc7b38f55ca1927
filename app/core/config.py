from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"  # local | development | production | test
    APP_NAME: str = "entity-crud-api"
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: str = "http://localhost:8008"

    DATABASE_URL: str
    REDIS_URL: str = ""

    FIXTURES_PATH: str = ""  # empty -> bundled app/data/fixtures.json

    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100
    MAX_PAGE: int = 10000
    DEFAULT_ORDER_BY: str = "updatedAt DESC"

    SLOW_REQUEST_MS: int = 20000

    DB_RETRY_ATTEMPTS: int = 3
    DB_RETRY_DELAY_SECONDS: float = 0.5

    RATE_LIMIT_WINDOW_SECONDS: int = 900
    RATE_LIMIT_MAX_REQUESTS: int = 200
    RATE_LIMIT_MAX_REQUESTS_PRODUCTION: int = 100

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.strip().lower() in {"local", "development"}

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.strip().lower() == "production"

    @property
    def rate_limit_max_requests(self) -> int:
        if self.is_production:
            return self.RATE_LIMIT_MAX_REQUESTS_PRODUCTION
        return self.RATE_LIMIT_MAX_REQUESTS

settings = Settings()
