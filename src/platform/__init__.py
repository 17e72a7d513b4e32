from __future__ import annotations

from .config import Settings, get_settings
from .logger import setup_logger
from .security import api_key_header, verify_api_key

__all__ = [
    "Settings",
    "get_settings",
    "setup_logger",
    "api_key_header",
    "verify_api_key",
]
