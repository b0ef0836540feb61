# app/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Board API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # CORS origins for frontend (comma separated, "*" allows everything)
    CORS_ORIGINS: list[str] = [
        o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
    ]

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite://board.sqlite3")
    # Create tables on startup; production deployments should use Aerich migrations instead
    generate_schemas: bool = _env_flag("GENERATE_SCHEMAS", "true" if os.getenv("ENV", "dev") == "dev" else "false")

    # JWT settings
    jwt_secret: str = os.getenv("JWT_SECRET", "dev-secret")
    jwt_algorithm: str = os.getenv("JWT_ALG", "HS256")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

    # Image uploads
    upload_dir: str = os.getenv("UPLOAD_DIR", "uploads")
    upload_url_prefix: str = os.getenv("UPLOAD_URL_PREFIX", "/uploads")

settings = Settings()  # Instantiate configuration
