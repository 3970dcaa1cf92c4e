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

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta, timezone
from enum import Enum

import httpx

from guardian_content.data_models.config import DEFAULT_BASE_URL
from guardian_content.data_models.enums import ALL
from guardian_content.exceptions import APIKeyValidationError, InvalidAPIKeyError


def wire_value(item: object) -> str:
    """Returns the string sent on the wire for an enum member or selector."""
    if isinstance(item, Enum):
        return str(item.value)
    return str(item)


def merge_selection(existing: list[str], items: Iterable[object]) -> list[str]:
    """
    Appends items to an existing selection, keeping the first occurrence of each.

    Using dict.fromkeys preserves order and removes duplicates.
    """
    return list(dict.fromkeys([*existing, *(wire_value(item) for item in items)]))


def render_selection(selection: list[str]) -> str:
    """Joins a selection with commas; a selection containing 'all' is just 'all'."""
    if ALL in selection:
        return ALL
    return ",".join(selection)


def format_date(year: int, month: int, day: int) -> str | None:
    """
    Formats a calendar date as YYYY-MM-DD.

    Returns None when (year, month, day) is not a real calendar date.

    Examples:
        >>> format_date(2024, 2, 29)
        '2024-02-29'
        >>> format_date(2023, 2, 29) is None
        True
    """
    try:
        return date(year, month, day).isoformat()
    except (ValueError, TypeError, OverflowError):
        return None


def format_datetime(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    utc_offset_hours: int,
) -> str | None:
    """
    Formats a timestamp as RFC 3339 with a whole-hour UTC offset.

    Returns None when the date or time of day is invalid. An offset that is not
    strictly between -24 and +24 hours falls back to UTC.

    Examples:
        >>> format_datetime(2021, 12, 31, 0, 0, 0, 5)
        '2021-12-31T00:00:00+05:00'
        >>> format_datetime(2021, 12, 31, 0, 0, 0, 999)
        '2021-12-31T00:00:00+00:00'
    """
    try:
        tz = timezone(timedelta(hours=utc_offset_hours))
    except (ValueError, TypeError, OverflowError):
        tz = timezone.utc
    try:
        value = datetime(year, month, day, hour, minute, second, tzinfo=tz)
    except (ValueError, TypeError, OverflowError):
        return None
    return value.isoformat()


async def validate_api_key(api_key: str, base_url: str = DEFAULT_BASE_URL) -> bool:
    """
    Validates a content API key by making a minimal search request.

    Args:
        api_key: The API key to validate.
        base_url: Base URL of the content API.

    Returns:
        True if the API key is valid.

    Raises:
        InvalidAPIKeyError: If the API key is invalid (4xx error).
        APIKeyValidationError: For other network-related validation errors.
    """
    async with httpx.AsyncClient() as client:
        try:
            response = await client.get(
                f"{base_url.rstrip('/')}/search",
                params={"page-size": "1", "api-key": api_key or ""},
            )
            if 400 <= response.status_code < 500:
                raise InvalidAPIKeyError(
                    f"API key is invalid or has expired. Status: {response.status_code}"
                )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise APIKeyValidationError(
                f"Failed to validate API key due to a server error: {e}"
            ) from e
        except httpx.RequestError as e:
            raise APIKeyValidationError(
                f"Failed to validate API key due to a network error: {e}"
            ) from e
    logging.info("Guardian content API key validation successful.")
    return True
