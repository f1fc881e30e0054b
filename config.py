# path: config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "si", "on")


DATABASE_URL = os.getenv("DATABASE_URL")
SQL_ECHO = _as_bool(os.getenv("SQL_ECHO"))

SECRET_KEY = os.getenv("SECRET_KEY", "CAMBIA_ESTE_SECRET_POR_ALGO_LARGO_Y_RANDOM")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if o.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# rol con privilegios completos (claim "roles" del token)
ADMIN_ROLE = os.getenv("ADMIN_ROLE", "Administrador")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
