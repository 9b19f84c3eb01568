from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "feature-builder-platform"
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    database_url: str = "sqlite:///./feature_builder.db"
    redis_url: str = "redis://localhost:6379/0"

    exports_dir: str = "/data/exports"
    default_api_prefix: str = "/api"

settings = Settings()
