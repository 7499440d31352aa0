import os
from datetime import timedelta

from dotenv import load_dotenv


load_dotenv()


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///adulting.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(
        minutes=int(os.getenv("JWT_ACCESS_TOKEN_EXPIRES_MINUTES", "60"))
    )

    # werkzeug method string; the trailing number is the work factor.
    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "pbkdf2:sha256:600000")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    _default_cors_origins = [
        "http://localhost:3000",
        r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    ]
    _cors_origins_raw = os.getenv("CORS_ALLOWED_ORIGINS", "").strip()
    if _cors_origins_raw:
        CORS_ALLOWED_ORIGINS = [
            item.strip() for item in _cors_origins_raw.split(",") if item.strip()
        ]
    else:
        CORS_ALLOWED_ORIGINS = _default_cors_origins
