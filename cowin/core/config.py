#!/usr/bin/env python3
"""
CoWIN Dashboard Configuration Management

Settings come from a YAML file, then environment variables (a local .env is
loaded first) override individual keys:
    COWIN_API_URL    -> api_url
    COWIN_LOG_LEVEL  -> log_level
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..api.vaccination_client import VACCINATION_API_URL

logger = logging.getLogger("cowin.server")

ENV_OVERRIDES = {
    "COWIN_API_URL": "api_url",
    "COWIN_LOG_LEVEL": "log_level",
}


class ServerConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    # Upstream data source
    api_url: str = VACCINATION_API_URL
    request_timeout: Optional[float] = Field(None, gt=0)   # None keeps the transport default


def load_config_from(path: str) -> ServerConfig:
    """Load server configuration from YAML file."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return ServerConfig(**data)


def load_config(path: Optional[str] = None) -> ServerConfig:
    """
    Load configuration with environment overrides applied.

    A missing file falls back to defaults; an unreadable or invalid one is an error.
    """
    load_dotenv()

    data = {}
    if path and Path(path).exists():
        logger.info(f"Loading configuration from: {path}")
        data = load_config_from(path).model_dump()
    elif path:
        logger.info(f"Config file not found: {path}, using defaults")

    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[key] = value

    return ServerConfig(**data)
