"""
Localization - Configuration Module
"""
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "dc-localization"
    DEBUG: bool = False

    # Source of the translation tables, formatted with the language code
    LOCALIZATION_URL_TEMPLATE: str = (
        "https://sp-translations.socialpointgames.com/deploy/dc/android/prod/"
        "dc_android_{language}_prod_wetd46pWuR8J5CmS.json"
    )
    DEFAULT_LANGUAGE: str = "en"

    # HTTP
    HTTP_TIMEOUT: float = 60.0
    PROXY_URL: Optional[str] = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
