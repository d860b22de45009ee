"""
Configuration module for the GitHub Actions client.

Values are read from the environment (and a local .env file) once at import
time. Every client constructor argument overrides the matching constant.
"""

import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _optional_int(key: str) -> Optional[int]:
    value = os.getenv(key)
    if value is None or not value.strip():
        return None
    return int(value)


# GitHub REST API
GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
GITHUB_API_VERSION = os.getenv("GITHUB_API_VERSION", "2022-11-28")
GITHUB_USER_AGENT = os.getenv("GITHUB_USER_AGENT", "ghactions")
GITHUB_REQUEST_TIMEOUT = float(os.getenv("GITHUB_REQUEST_TIMEOUT", "150"))
GITHUB_CONNECT_TIMEOUT = float(os.getenv("GITHUB_CONNECT_TIMEOUT", "60"))
GITHUB_PER_PAGE = _optional_int("GITHUB_PER_PAGE")

# Personal access token authentication
GITHUB_TOKEN = os.getenv("GITHUB_TOKEN")

# GitHub App authentication
GITHUB_APP_ID = os.getenv("GITHUB_APP_ID")
GITHUB_APP_PRIVATE_KEY_PATH = os.getenv("GITHUB_APP_PRIVATE_KEY_PATH")
GITHUB_APP_PRIVATE_KEY_CONTENT = os.getenv("GITHUB_APP_PRIVATE_KEY_CONTENT")
GITHUB_INSTALLATION_ID = _optional_int("GITHUB_INSTALLATION_ID")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
APP_LOG_FILE = os.getenv("APP_LOG_FILE")
