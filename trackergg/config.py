# trackergg/config.py
# -- environment settings for scripts; the client itself never reads these
import logging
import os
from dotenv import load_dotenv

load_dotenv()


def float_env(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be a number of seconds, got {raw!r}") from None


TRN_API_KEY = os.getenv("TRN_API_KEY")
TRACKER_TIMEOUT = float_env("TRACKER_TIMEOUT", 15.0)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO))
