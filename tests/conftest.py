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
Global pytest configuration and fixtures.

Pytest automatically discovers and loads this file. Fixtures defined here are
available to all tests in this directory and its subdirectories without
needing to import them explicitly.
"""

import os
from collections.abc import Callable
from unittest.mock import patch

import httpx
import pytest
from guardian_content.clients import GuardianContentClient


@pytest.fixture(autouse=True)
def clean_env():
    """
    Automatically clear environment variables for all tests to ensure
    tests are hermetic and don't depend on the host environment.
    """
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture(autouse=True)
def mock_load_dotenv():
    """
    Automatically mock load_dotenv for all tests to prevent
    loading environment variables from local .env files.
    """
    with patch("guardian_content.config.load_dotenv"):
        yield


@pytest.fixture
def search_payload() -> dict:
    """A trimmed /search response with show-fields=byline,shortUrl."""
    return {
        "response": {
            "status": "ok",
            "userTier": "developer",
            "total": 2,
            "startIndex": 1,
            "pageSize": 10,
            "currentPage": 1,
            "pages": 1,
            "orderBy": "newest",
            "results": [
                {
                    "id": "politics/2024/jul/05/general-election-results",
                    "type": "article",
                    "sectionId": "politics",
                    "sectionName": "Politics",
                    "webPublicationDate": "2024-07-05T06:00:00Z",
                    "webTitle": "General election results",
                    "webUrl": "https://www.theguardian.com/politics/2024/jul/05/general-election-results",
                    "apiUrl": "https://content.guardianapis.com/politics/2024/jul/05/general-election-results",
                    "isHosted": False,
                    "pillarId": "pillar/news",
                    "pillarName": "News",
                    "fields": {
                        "byline": "Jane Doe",
                        "shortUrl": "https://www.theguardian.com/p/abc12",
                    },
                },
                {
                    "id": "world/2024/jul/06/elections-live",
                    "type": "liveblog",
                    "sectionId": "world",
                    "sectionName": "World news",
                    "webPublicationDate": "2024-07-06T08:30:00Z",
                    "webTitle": "Elections live",
                    "webUrl": "https://www.theguardian.com/world/2024/jul/06/elections-live",
                    "apiUrl": "https://content.guardianapis.com/world/2024/jul/06/elections-live",
                    "isHosted": False,
                    "fields": {"shortUrl": "https://www.theguardian.com/p/def34"},
                },
            ],
        }
    }


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], GuardianContentClient]:
    """Builds a client whose requests are answered by the given handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> GuardianContentClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return GuardianContentClient("test-api-key", http_client=http_client)

    return _make
