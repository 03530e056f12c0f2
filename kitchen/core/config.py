# kitchen/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # Database
    DATABASE_URL: str = "sqlite:///./kitchen.db"

    # Seeded into an empty store on first run only
    DEFAULT_LOCATIONS: list[str] = ["Fridge", "Freezer", "Pantry"]

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Open Food Facts
    OPENFOODFACTS_URL: str = "https://world.openfoodfacts.org"
    OPENFOODFACTS_TIMEOUT: float = 10
    OPENFOODFACTS_USER_AGENT: str = "KitchenInventory/1.0"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
    )


settings = Settings()
