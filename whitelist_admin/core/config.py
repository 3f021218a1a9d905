import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/whitelist.db")

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME")
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH")
JWT_SECRET = os.getenv("JWT_SECRET")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")

# Admin sessions are fixed at 7 days.
TOKEN_TTL_SECONDS = 7 * 24 * 60 * 60
ADMIN_ROLE = "admin"

API_PREFIX = os.getenv("API_PREFIX", "").rstrip("/")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SERVICE_NAME = "whitelist-admin"


def missing_settings() -> list[str]:
    missing = []
    if not ADMIN_USERNAME:
        missing.append("ADMIN_USERNAME")
    if not ADMIN_PASSWORD_HASH:
        missing.append("ADMIN_PASSWORD_HASH")
    if not JWT_SECRET:
        missing.append("JWT_SECRET")
    return missing
