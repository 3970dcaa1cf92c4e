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
Exceptions raised by the Guardian content client.
"""


class GuardianContentError(Exception):
    """Base exception for all client errors."""


class NetworkError(GuardianContentError):
    """The request never produced an HTTP response (DNS, connect, timeout)."""


class ApiError(GuardianContentError):
    """The API answered with a status outside the 2xx range."""

    def __init__(self, status_code: int, message: str | None = None, body: str = ""):
        self.status_code = status_code
        self.message = message
        self.body = body
        detail = message or body or "no error detail returned"
        super().__init__(f"Guardian API error {status_code}: {detail}")


class DecodeError(GuardianContentError):
    """The response body did not match the expected shape."""


class MissingQueryParameterError(GuardianContentError):
    """A parameter required by the selected endpoint was never set."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Missing query parameter: {parameter}")


class InvalidAPIKeyError(GuardianContentError):
    """The API key was rejected by the API."""


class APIKeyValidationError(GuardianContentError):
    """The API key could not be validated."""
