# config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    backend_url: str = Field("http://localhost:3001")
    database_url: str = Field("sqlite:///./farm_to_table.db")
    jwt_secret_key: str = Field("change-me-farm-to-table-secret")
    jwt_algorithm: str = Field("HS256")
    jwt_expire_minutes: int = Field(1440)
    log_level: str = Field("INFO")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
