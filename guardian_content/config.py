# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Configuration module for the content client.
"""

import os

from dotenv import load_dotenv

from .data_models.config import ClientConfig

# Environment variable names
GUARDIAN_API_KEY_ENV = "GUARDIAN_API_KEY"
GUARDIAN_BASE_URL_ENV = "GUARDIAN_BASE_URL"
GUARDIAN_TIMEOUT_ENV = "GUARDIAN_TIMEOUT"


def _load_env_file() -> None:
    """Load .env file if present in the current directory."""
    load_dotenv()


def _parse_timeout(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(
            f"{GUARDIAN_TIMEOUT_ENV} must be a number of seconds, got '{value}'"
        ) from None


def get_client_config() -> ClientConfig:
    """
    Get client configuration from environment variables.

    Returns:
        ClientConfig object containing the configuration

    Raises:
        ValueError: If required configuration is missing or invalid
    """
    _load_env_file()

    api_key = os.getenv(GUARDIAN_API_KEY_ENV)
    if not api_key or not api_key.strip():
        raise ValueError(f"{GUARDIAN_API_KEY_ENV} environment variable is required")

    # Build config data, only including fields that are provided
    config_data = {"api_key": api_key}

    base_url = os.getenv(GUARDIAN_BASE_URL_ENV)
    if base_url:
        config_data["base_url"] = base_url

    timeout = os.getenv(GUARDIAN_TIMEOUT_ENV)
    if timeout:
        config_data["timeout"] = _parse_timeout(timeout)

    return ClientConfig.model_validate(config_data)
