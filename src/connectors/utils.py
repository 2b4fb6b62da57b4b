"""
Connector Utilities
-------------------
Shared helpers for logging, environment loading and YAML settings.
"""
import os
import logging
from pathlib import Path
from typing import Any, Dict, List

import yaml
from dotenv import load_dotenv


def setup_logging(level: str = "INFO") -> None:
    """Configure logging format and level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def load_env(dotenv_path: Path) -> None:
    """Load environment variables from a .env file if it exists."""
    if dotenv_path.exists():
        load_dotenv(dotenv_path)
        logging.debug(f"Loaded .env from {dotenv_path}")
    else:
        logging.warning(f".env file not found at {dotenv_path}")


def validate_env_vars(required: List[str]) -> Dict[str, str]:
    """Validate required environment variables and return their values."""
    missing = [var for var in required if not os.getenv(var)]
    if missing:
        raise ValueError(
            f"Missing required environment variables: {', '.join(missing)}"
        )
    return {var: os.getenv(var) for var in required}


def get_settings(settings_path: Path) -> Dict[str, Any]:
    """Load a YAML settings file, returning an empty dict for an empty file."""
    with open(settings_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
