from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "DineHub"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./dinehub.db"
    SQL_ECHO: bool = False

    # Sessions (absolute expiry, counted from issuance)
    SESSION_COOKIE_NAME: str = "dinehub_session"
    SESSION_TTL_HOURS: int = 24
    SESSION_COOKIE_SECURE: bool = False

    # CORS (comma-separated string)
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5000,http://localhost:8000"

    # Anthropic menu drafts
    ANTHROPIC_API_KEY: Optional[str] = None
    AI_MODEL: str = "claude-sonnet-4-5-20250929"
    AI_MAX_TOKENS: int = 4096
    AI_TIMEOUT_SECONDS: float = 60.0
    DEFAULT_TONE: str = "standard"

    # QR codes
    QR_SIZE: int = 300
    QR_BORDER: int = 4
    QR_COLOR: str = "#000000"
    QR_BACKGROUND: str = "#FFFFFF"

    SEED_DEMO_DATA: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def session_ttl_seconds(self) -> int:
        return self.SESSION_TTL_HOURS * 3600

settings = Settings()
