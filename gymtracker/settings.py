from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    DATABASE_URL: str = "sqlite:///./gymtracker.db"
    DB_ECHO: bool = False

    # Tracking
    HISTORY_LIMIT: int = 4          # entries shown under an exercise
    WEIGHT_UNIT: str = "lbs"

    # HTTP
    ALLOW_ORIGINS: str = "*"
    API_VERSION: str = "dev"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOW_ORIGINS.split(",") if o.strip()]

@lru_cache
def get_settings() -> Settings:
    return Settings()
