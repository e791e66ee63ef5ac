from functools import lru_cache
from typing import Literal
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "WarehouseReorder"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Mongo
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "warehouse_db"
    MONGO_TLS: bool = False                    # Atlas / SRV deployments need True
    products_collection: str = "products"

    # Redis (optional, analysis cache only)
    REDIS_URL: str = ""

    # CORS, CSV list of origins. Empty means any origin.
    ALLOWED_ORIGINS: str = ""

    # Reorder engine defaults
    reorder_buffer_days: int = 5               # added to supplier lead time
    reorder_target_days: int = 60              # stock coverage an order should restore
    spike_forecast_window_days: int = 30       # window used to blend spiked sales

    # Cache config
    reorder_analysis_cache_ttl: int = 60       # seconds

    # API
    api_prefix: str = "/api"

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
