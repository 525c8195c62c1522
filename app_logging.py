# app_logging.py
import logging
from typing import Optional

from settings import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_CONFIGURED = False


def _configure(level: str) -> None:
    global _CONFIGURED

    if _CONFIGURED:
        return

    # Streamlit reruns the script on every interaction, so only one handler
    root = logging.getLogger("amino")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.setLevel(level.upper())
    root.propagate = False

    _CONFIGURED = True


def get_logger(name: str = "app", level: Optional[str] = None) -> logging.Logger:
    _configure(level or settings.log_level)
    return logging.getLogger(f"amino.{name}")
