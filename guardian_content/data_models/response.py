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
Pydantic models mirroring the JSON returned by the content API.

Most attributes are only present when explicitly requested (show-fields,
show-tags, show-blocks) or for certain content types, so they default to
None. Required attributes are the ones the API returns on every item.
"""

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AwareDatetime,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from guardian_content.exceptions import DecodeError

# Date, a "T", then at least hours and minutes. The offset is enforced by AwareDatetime.
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}")


def _require_timestamp_string(value: Any) -> Any:
    """Rejects Unix timestamps and date-only strings before datetime parsing."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not _TIMESTAMP_RE.match(value):
        raise ValueError("expected an ISO 8601 timestamp with a time and UTC offset")
    return value


Timestamp = Annotated[AwareDatetime, BeforeValidator(_require_timestamp_string)]


class ResponseBaseModel(BaseModel):
    """Base model: camelCase keys on the wire, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def model_dump(
        self,
        **kwargs: dict[str, Any],
    ) -> dict[str, Any]:
        """Override model_dump to exclude None by default."""
        kwargs.setdefault("exclude_none", True)
        return super().model_dump(**kwargs)

    def model_dump_json(
        self,
        **kwargs: dict[str, Any],
    ) -> str:
        """Override model_dump_json to exclude None by default."""
        kwargs.setdefault("exclude_none", True)
        return super().model_dump_json(**kwargs)


class Fields(ResponseBaseModel):
    """Values returned for the requested show-fields.

    The API serializes most of these as strings ("true", "1234"), so they are
    kept as strings. Numbers are coerced rather than rejected.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    byline: str | None = None
    short_url: str | None = None
    trail_text: str | None = None
    headline: str | None = None
    body: str | None = None
    body_text: str | None = None
    last_modified: Timestamp | None = None
    has_story_package: str | None = None
    score: str | None = None
    standfirst: str | None = None
    show_in_related_content: str | None = None
    thumbnail: str | None = None
    wordcount: str | None = None
    commentable: str | None = None
    is_premoderated: str | None = None
    allow_ugc: str | None = None
    publication: str | None = None
    internal_page_code: str | None = None
    production_office: str | None = None
    should_hide_adverts: str | None = None
    live_blogging_now: str | None = None
    comment_close_date: Timestamp | None = None
    star_rating: str | None = None


class ContentTag(ResponseBaseModel):
    id: str
    web_title: str
    web_url: str
    type: str | None = None
    section_id: str | None = None
    section_name: str | None = None
    api_url: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    byline_image_url: str | None = None
    bio: str | None = None
    twitter_handle: str | None = None


class Edition(ResponseBaseModel):
    id: str
    web_title: str
    web_url: str
    api_url: str | None = None
    edition: str | None = None
    path: str | None = None


class Section(ResponseBaseModel):
    id: str
    web_title: str
    web_url: str
    api_url: str | None = None
    editions: list[Edition] | None = None


class ContentBlock(ResponseBaseModel):
    """A single block of content; live blogs carry many body blocks."""

    id: str
    body_html: str | None = None
    body_text_summary: str | None = None
    title: str | None = None
    created_date: Timestamp | None = None
    first_published_date: Timestamp | None = None
    published_date: Timestamp | None = None
    last_modified_date: Timestamp | None = None
    contributors: list[str] | None = None
    elements: list[dict[str, Any]] | None = None


class Blocks(ResponseBaseModel):
    main: ContentBlock | None = None
    body: list[ContentBlock] | None = None
    total_body_blocks: int | None = None


class SearchResult(ResponseBaseModel):
    """One matched item: a piece of content, a tag, a section or an edition."""

    id: str
    web_title: str
    web_url: str
    type: str | None = None
    section_id: str | None = None
    section_name: str | None = None
    web_publication_date: Timestamp | None = None
    api_url: str | None = None
    is_hosted: bool | None = None
    pillar_id: str | None = None
    pillar_name: str | None = None
    fields: Fields | None = None
    tags: list[ContentTag] | None = None
    section: Section | None = None
    blocks: Blocks | None = None


class SearchResponse(ResponseBaseModel):
    """The body of the ``response`` object returned by every endpoint."""

    status: str
    user_tier: str | None = None
    total: int | None = None
    start_index: int | None = None
    page_size: int | None = None
    current_page: int | None = None
    # Signed: the API answers an invalid page-size request with -1.
    pages: int | None = None
    order_by: str | None = None
    message: str | None = None
    results: list[SearchResult] | None = None
    content: SearchResult | None = Field(
        default=None, description="The requested item on the single-item endpoint."
    )
    tag: ContentTag | None = None
    section: Section | None = None
    edition: Edition | None = None

    @property
    def is_error(self) -> bool:
        return self.status == "error"


class ApiEnvelope(ResponseBaseModel):
    """Top-level JSON object.

    Authentication failures come back with only ``message`` set.
    """

    message: str | None = None
    response: SearchResponse | None = None


def decode_response(body: str | bytes) -> SearchResponse:
    """
    Decodes a raw response body into a SearchResponse.

    Raises:
        DecodeError: If the body is not JSON, does not match the model, or has
            no ``response`` object.
    """
    try:
        envelope = ApiEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Unexpected response body: {e}") from e

    if envelope.response is None:
        detail = f": {envelope.message}" if envelope.message else ""
        raise DecodeError(f"Response body has no 'response' object{detail}")
    return envelope.response
