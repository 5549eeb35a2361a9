from typing import List, Union
from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ic_court.models.enums import UserRole

class Settings(BaseSettings):
    PROJECT_NAME: str = "Information Commission Court System"
    API_V1_STR: str = "/api/v1"

    # CORS
    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = ["http://localhost:5173", "http://localhost:3000"]

    @field_validator("BACKEND_CORS_ORIGINS", mode='before')
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    # Database
    SQLALCHEMY_DATABASE_URI: str = "sqlite+aiosqlite:///./ic_court.db"
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 2022

    # Placeholder actor until a session provider resolves the real one
    DEFAULT_ACTOR_ID: int = 1
    DEFAULT_ACTOR_ROLE: UserRole = UserRole.STAFF

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")

settings = Settings()
