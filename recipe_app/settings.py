from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    database_url: str = "sqlite:///./recipes.db"

    # Startup
    create_schema: bool = True  # Dev convenience; use alembic for real databases
    seed_data: bool = True  # Only applied when no recipes exist yet

    log_level: str = "INFO"

    # Form submissions (per-IP)
    rate_limit: str = "60/minute"


settings = Settings()
