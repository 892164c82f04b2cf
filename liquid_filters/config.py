from dotenv import load_dotenv
import os

load_dotenv()  # take environment variables from .env


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def locale_name() -> str:
    """Locale used for the active conventions; "" means the process environment."""
    return env_get("LIQUID_FILTERS_LOCALE", "")


def log_level() -> str:
    return env_get("LIQUID_FILTERS_LOG_LEVEL", "INFO").upper()
