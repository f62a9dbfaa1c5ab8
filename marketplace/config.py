from dotenv import load_dotenv
import os
from typing import Final # So that my variables are immutable

# Load environment variables from .env file
load_dotenv(dotenv_path=".env")

# Database configuration
DATABASE_URL: Final[str] = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./marketplace.db")

# JWT configuration
SECRET_KEY: Final[str] = os.getenv("SECRET_KEY", "your-secret-key-here")  # Change in production!
ALGORITHM: Final[str] = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES: Final[int] = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

# API configuration
API_VERSION: Final[str] = os.getenv("API_VERSION", "v1")
CORS_ORIGINS: Final[list[str]] = [
    origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
]
DEBUG: Final[bool] = os.getenv("DEBUG", "False").lower() in ("true", "1", "t")  # Convert to boolean

# Logging configuration
LANG: Final[str] = os.getenv("LANG_CODE", "en")
LOGLEVEL: Final[str] = os.getenv("LOGLEVEL", "INFO").upper()

# Response formatting
CREATED_AT_FORMAT: Final[str] = os.getenv("CREATED_AT_FORMAT", "%d/%m/%Y %H:%M:%S")
