from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


# Load backend/.env if it exists so local overrides (e.g. CORS_ORIGINS, LOG_LEVEL)
# are available without exporting them in the shell.
BASE_DIR = Path(__file__).resolve().parents[2]
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)


def _int_env(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


def _bool_env(key: str, default: bool) -> bool:
    return os.getenv(key, str(default)).strip().lower() in ("1", "true", "yes", "on")


def _origins_env(key: str, default: str) -> list[str]:
    origins = [o.strip() for o in os.getenv(key, default).split(",") if o.strip()]
    return ["*"] if "*" in origins else origins


class Settings:
    PROJECT_NAME = os.getenv("PROJECT_NAME", "VyomGarud UAV Systems API")
    API_V1_STR = os.getenv("API_V1_STR", "/api")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = _int_env("PORT", 8000)
    RELOAD = _bool_env("RELOAD", False)

    # "*" anywhere in the list allows every origin
    CORS_ORIGINS = _origins_env("CORS_ORIGINS", "*")


settings = Settings()
