from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Aluminum Window Calculator"
    APP_SLUG: str = "aluminum-window-calculator"
    COMPANY_NAME: str = ""
    LOG_LEVEL: str = "INFO"

    # Frontend is served from the same origin; widen for a separately hosted UI
    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
