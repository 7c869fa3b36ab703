from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # database
    DATABASE_URL: str
    SQL_ECHO: bool = False
    CREATE_TABLES: bool = True

    # admin (static shared pair, promoted onto a user record)
    ADMIN_ID: str
    ADMIN_PASSWORD: str

    # api
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
