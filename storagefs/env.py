"""
Utilities for loading environment variables and runtime configuration.
"""
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

DEFAULT_ROOT_NAME = "storage_file_system"

DEFAULT_CONFIG: Dict[str, Any] = {
    "root_name": DEFAULT_ROOT_NAME,
    "data_dir": "data",
    "events_file": None,
}

# config key -> environment variable
ENV_KEYS = {
    "root_name": "STORAGEFS_ROOT_NAME",
    "data_dir": "STORAGEFS_DATA_DIR",
    "events_file": "STORAGEFS_EVENTS_FILE",
}


@lru_cache(maxsize=1)
def load_env() -> Path:
    """
    Load environment variables from the repository-level .env file once.
    Returns the path to the .env that was attempted.
    """
    root = Path(__file__).resolve().parents[1]
    dotenv_path = root / ".env"
    # override=False so variables exported by the host win over the .env file
    load_dotenv(dotenv_path=dotenv_path, override=False)
    return dotenv_path


def load_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge DEFAULT_CONFIG, STORAGEFS_* environment variables and explicit
    overrides (highest priority). Overrides set to None are ignored.
    """
    load_env()
    config = dict(DEFAULT_CONFIG)
    for key, env_name in ENV_KEYS.items():
        value = os.getenv(env_name)
        if value:
            config[key] = value
    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value
    return config
