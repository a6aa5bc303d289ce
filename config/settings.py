"""
Application settings and environment configuration.

Purpose:
- Centralize all config (contacts API location, HTTP timeouts, logging, dev server)
- Load from environment variables for 12-factor app compliance
- Provide sensible defaults for local development
"""
import os
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # API Configuration (dev contacts server)
    API_TITLE: str = "Contacts API"
    API_VERSION: str = "0.1"
    DEBUG: bool = os.getenv("DEBUG", "True").lower() == "true"

    # Contacts REST API consumed by the client.
    # Must end with "/" so relative paths ("users", "users/3") resolve under it.
    # Emulator example: http://10.0.2.2:8000/api/
    # Device on the LAN: http://192.168.1.100:8000/api/
    CONTACTS_API_BASE_URL: str = os.getenv("CONTACTS_API_BASE_URL", "http://localhost:8000/api/")

    # Transport timeouts (seconds)
    HTTP_CONNECT_TIMEOUT: float = float(os.getenv("HTTP_CONNECT_TIMEOUT", "30"))
    HTTP_READ_TIMEOUT: float = float(os.getenv("HTTP_READ_TIMEOUT", "30"))
    HTTP_WRITE_TIMEOUT: float = float(os.getenv("HTTP_WRITE_TIMEOUT", "30"))
    HTTP_POOL_TIMEOUT: float = float(os.getenv("HTTP_POOL_TIMEOUT", "30"))

    # Log request/response bodies of the HTTP client
    HTTP_LOG_BODIES: bool = os.getenv("HTTP_LOG_BODIES", "True").lower() == "true"

    # Logging: configure logging level
    # Values: DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Dev contacts server (python main.py)
    DEV_SERVER_HOST: str = os.getenv("DEV_SERVER_HOST", "0.0.0.0")
    DEV_SERVER_PORT: int = int(os.getenv("DEV_SERVER_PORT", "8000"))

    class Config:
        env_file = ".env"  # Load from .env file if present
        extra = "allow"

# Global settings instance
settings = Settings()
