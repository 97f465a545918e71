"""Configuration module for tracklist.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

Usage:
------
```python
from tracklist.config import settings
capacity = settings.tracklist.default_capacity

from tracklist.config import get_logger
logger = get_logger(__name__)
```
"""

from .logging import get_logger, setup_loguru_logger
from .settings import Settings, settings

__all__ = [
    "Settings",
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
