import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()

DEFAULT_SALT_ROUNDS = 10


def _get(key: str, default=None):
    """Environment variables take precedence over env.yaml"""
    value = os.environ.get(key)
    if value is not None:
        return value
    return data.get(key, default)


def _get_bool(key: str, default: bool) -> bool:
    value = _get(key, default)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _get_list(key: str, default: list) -> list:
    value = _get(key, default)
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value)


def get_salt_rounds() -> int:
    """
    Bcrypt cost factor, re-read on every call so a changed SALT_ROUNDS
    applies to the next hash without a restart.

    Zero or non-numeric values fall back to the default.
    """
    try:
        rounds = int(_get("SALT_ROUNDS", DEFAULT_SALT_ROUNDS))
    except (TypeError, ValueError):
        return DEFAULT_SALT_ROUNDS
    return rounds or DEFAULT_SALT_ROUNDS


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./finance.db")
    API_PREFIX = _get("API_PREFIX", "/api")
    API_PORT = int(_get("API_PORT", 8000))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get_list("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = _get_bool("CORS_ALLOW_CREDENTIALS", False)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    ACCESS_TOKEN_SECRET = _get("ACCESS_TOKEN_SECRET", "")
    CLIENT_RESET_URL = _get("CLIENT_RESET_URL", "")
