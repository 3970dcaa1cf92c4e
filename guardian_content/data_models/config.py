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
Pydantic models for configuring the content client.
"""

import httpx
from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://content.guardianapis.com"


def normalize_base_url(base_url: str) -> str:
    """Requires an absolute http(s) URL and strips the trailing slash.

    Raises:
        ValueError: If the URL is malformed or has no http(s) scheme or host.
    """
    base_url = base_url.strip().rstrip("/")
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise ValueError(f"base_url is not a valid URL: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(
            f"base_url must be an absolute http:// or https:// URL, got '{base_url}'"
        )
    return base_url


class ClientConfig(BaseModel):
    """Configuration for a GuardianContentClient."""

    api_key: str = Field(description="API key for the Guardian content API")
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the content API"
    )
    timeout: float | None = Field(
        default=None,
        description="Request timeout in seconds (transport default if unset)"
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("api_key must not be empty")
        return v

    @field_validator("base_url")
    @classmethod
    def check_base_url(cls, v: str) -> str:
        return normalize_base_url(v)
