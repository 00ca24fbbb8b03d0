from typing import Optional
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be configured via .env file or environment variables.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "Students API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = ""

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # =============================================================================
    # MYSQL DATABASE - Individual components
    # =============================================================================
    MYSQL_HOST: str = "127.0.0.1"
    MYSQL_PORT: int = 3306
    MYSQL_USER: str = "root"
    MYSQL_PASSWORD: str = Field(
        default="",
        validation_alias=AliasChoices("MYSQL_PASSWORD", "PASSWORD_DB"),
    )
    MYSQL_DB: str = "school"

    # Database URL - set directly or built from the MYSQL_* components
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    # =============================================================================
    # DATABASE CONNECTION SETTINGS
    # =============================================================================
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_CONNECT_TIMEOUT: int = 10
    DB_ECHO_SQL: bool = False
    DB_CREATE_TABLES: bool = False

    # =============================================================================
    # ERRORS & LOGGING
    # =============================================================================
    EXPOSE_ERROR_DETAILS: bool = False
    LOG_LEVEL: str = "INFO"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def build_database_url(cls, v: Optional[str], info) -> str:
        """
        Build DATABASE_URL from components if not provided.

        Priority:
        1. Use DATABASE_URL if explicitly set in .env
        2. Build from MYSQL_* components
        """
        if isinstance(v, str) and v:
            return v

        url = URL.create(
            "mysql+pymysql",
            username=info.data.get("MYSQL_USER"),
            password=info.data.get("MYSQL_PASSWORD") or None,
            host=info.data.get("MYSQL_HOST"),
            port=info.data.get("MYSQL_PORT"),
            database=info.data.get("MYSQL_DB"),
        )
        return url.render_as_string(hide_password=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()
