from typing import Dict, Optional
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from mojitracker.config.constants import (
    DEFAULT_LIST_KEYS_LIMIT,
    DEFAULT_MULTI_DESTINATION,
    DEFAULT_NO_VERIFY,
    DEFAULT_PATH_COUNT,
    ENV_PREFIX,
)


class TrackerSettings(BaseModel):
    """Client-side defaults applied by the Tracker facade"""

    default_path_count: int = Field(
        DEFAULT_PATH_COUNT, ge=1, description="Paths requested by get_paths"
    )
    list_keys_limit: int = Field(
        DEFAULT_LIST_KEYS_LIMIT, ge=1, description="Maximum keys returned by list_keys"
    )
    multi_destination: bool = Field(
        DEFAULT_MULTI_DESTINATION,
        description="Whether create_open asks for more than one destination",
    )
    no_verify: bool = Field(
        DEFAULT_NO_VERIFY,
        description="Whether get_paths skips the tracker's path verification",
    )
    log_level: str = Field("WARNING", description="Level for mojitracker loggers")


# Environment variable suffix -> settings field
_ENV_FIELDS: Dict[str, str] = {
    "PATH_COUNT": "default_path_count",
    "LIST_KEYS_LIMIT": "list_keys_limit",
    "MULTI_DEST": "multi_destination",
    "NO_VERIFY": "no_verify",
    "LOG_LEVEL": "log_level",
}


def load_settings(env_path: Optional[str] = None) -> TrackerSettings:
    """
    Build TrackerSettings from MOJI_* environment variables.

    Args:
        env_path: Optional .env file loaded first; variables already set in
            the environment take precedence over the file

    Returns:
        TrackerSettings with defaults for anything not configured
    """
    if env_path and os.path.exists(env_path):
        load_dotenv(env_path)

    values = {
        field: os.environ[ENV_PREFIX + suffix]
        for suffix, field in _ENV_FIELDS.items()
        if ENV_PREFIX + suffix in os.environ
    }
    return TrackerSettings(**values)
