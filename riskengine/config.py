"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "fraud-risk-engine"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    # Optional YAML file replacing the built-in rule catalog
    fraud_catalog_path: str | None = None
    # IANA zone for hour-of-day rules; unset means process local time
    fraud_local_timezone: str | None = None

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


settings = Settings()
