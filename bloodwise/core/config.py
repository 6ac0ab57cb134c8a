from typing import List, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # App Config
    PROJECT_NAME: str = "Bloodwise"
    PROJECT_VERSION: str = "0.1.0"
    ENVIRONMENT: Literal["development", "production", "testing"] = "development"
    DEBUG: bool = False
    API_V1_STR: str = "/v1"

    # Simulated pacing (upload processing, verification, chat replies)
    SIMULATE_LATENCY: bool = True
    PROCESSING_DELAY_SECONDS: float = 2.0
    VERIFICATION_DELAY_SECONDS: float = 1.5
    CHAT_DELAY_MIN_SECONDS: float = 0.8
    CHAT_DELAY_MAX_SECONDS: float = 1.3
    VERIFICATION_SUCCESS_RATE: float = 0.9

    # Report upload
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024
    ALLOWED_UPLOAD_TYPES: List[str] = ["application/pdf", "image/jpeg", "image/png"]

    # In-memory history (lost on restart)
    HISTORY_LIMIT: int = 50

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True
    )

settings = Settings()
