"""
Global Configuration and Safety Defaults.

Module constants hold the defaults; an optional ``.structview/config.yaml``
overrides them per project. A missing or broken config file is never fatal.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(".structview/config.yaml")

# --- Fetch Limits ---
# Seconds before an upstream document fetch is abandoned
FETCH_TIMEOUT_SECONDS = 30.0

# Page documents of large sites run to tens of MB; refuse anything absurd
MAX_DOCUMENT_BYTES = 256 * 1024 * 1024

# Some CDNs reject non-browser user agents
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

DEFAULT_HEADERS: Dict[str, str] = {
    "Accept": "application/json, text/plain;q=0.9, */*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate",
    "Sec-Fetch-Site": "same-origin",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Dest": "empty",
}

# --- Display ---
OUTLINE_INDENT = "  "


class ViewerSettings(BaseModel):
    """Per-project settings read from ``.structview/config.yaml``."""
    default_source: Optional[str] = None
    fetch_timeout: float = Field(default=FETCH_TIMEOUT_SECONDS, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    max_document_bytes: int = Field(default=MAX_DOCUMENT_BYTES, gt=0)


def load_settings(config_path: Optional[Path] = None) -> ViewerSettings:
    """
    Read settings from YAML, falling back to defaults.

    Args:
        config_path: Explicit config file; defaults to ``.structview/config.yaml``.

    Returns:
        ViewerSettings: Validated settings.
    """
    path = config_path or CONFIG_PATH
    if not path.exists():
        return ViewerSettings()

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return ViewerSettings.model_validate(data)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logger.warning(f"Ignoring unreadable config {path}: {e}")
        return ViewerSettings()
