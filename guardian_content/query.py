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
Chainable builder for content API requests.

Every configuration method stores one query-string parameter and returns the
builder. Parameters that were never set are never sent. Invalid dates and
star ratings are dropped silently instead of raising.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

import httpx

from guardian_content.data_models.enums import (
    Block,
    BlockSelector,
    ContentField,
    Endpoint,
    OrderBy,
    OrderDate,
    StarRating,
    TagType,
    UseDate,
)
from guardian_content.exceptions import MissingQueryParameterError
from guardian_content.utils import (
    format_date,
    format_datetime,
    merge_selection,
    render_selection,
)

if TYPE_CHECKING:
    from guardian_content.clients import GuardianContentClient
    from guardian_content.data_models.response import SearchResponse

logger = logging.getLogger(__name__)

API_KEY_PARAM = "api-key"
SEARCH_PARAM = "q"

_ENDPOINT_PATHS = {
    Endpoint.CONTENT: "search",
    Endpoint.TAGS: "tags",
    Endpoint.SECTIONS: "sections",
    Endpoint.EDITIONS: "editions",
}


class ContentQuery:
    """
    Accumulates parameters for a single request.

    A query is created by a GuardianContentClient, configured by chaining,
    and consumed by ``send()``:

        response = await (
            client.search("Elections")
            .page_size(10)
            .show_fields(ContentField.BYLINE, ContentField.LAST_MODIFIED)
            .order_by(OrderBy.NEWEST)
            .send()
        )
    """

    def __init__(self, client: GuardianContentClient) -> None:
        self._client = client
        self._endpoint = Endpoint.CONTENT
        self._params: dict[str, str] = {}
        self._selections: dict[str, list[str]] = {}

    def endpoint(self, endpoint: Endpoint) -> ContentQuery:
        """
        Selects the API endpoint. Defaults to Endpoint.CONTENT.

        With Endpoint.SINGLE_ITEM the value passed to ``search()`` is the item
        path, e.g. "books/2022/jan/01/2022-in-books-highlights-for-the-year-ahead".
        """
        self._endpoint = Endpoint(endpoint)
        return self

    def search(self, q: str) -> ContentQuery:
        """Supports AND, OR and NOT operators and exact phrases in double quotes."""
        return self._set(SEARCH_PARAM, q)

    def page(self, page: int) -> ContentQuery:
        return self._set("page", str(page))

    def page_size(self, page_size: int) -> ContentQuery:
        """Results per page. The API accepts 0 to 200 and rejects the rest."""
        return self._set("page-size", str(page_size))

    def order_by(self, order_by: OrderBy) -> ContentQuery:
        return self._set("order-by", OrderBy(order_by).value)

    def order_date(self, order_date: OrderDate) -> ContentQuery:
        return self._set("order-date", OrderDate(order_date).value)

    def use_date(self, use_date: UseDate) -> ContentQuery:
        """Which date the from/to filters apply to."""
        return self._set("use-date", UseDate(use_date).value)

    def show_fields(self, *fields: ContentField) -> ContentQuery:
        """Adds optional fields to each result; ContentField.ALL overrides the rest."""
        return self._select("show-fields", [ContentField(f) for f in fields])

    def query_fields(self, *fields: ContentField) -> ContentQuery:
        """Restricts which indexed fields the search terms are matched against."""
        return self._select("query-fields", [ContentField(f) for f in fields])

    def show_tags(self, *tag_types: TagType) -> ContentQuery:
        return self._select("show-tags", [TagType(t) for t in tag_types])

    def show_blocks(self, *blocks: Block | BlockSelector) -> ContentQuery:
        """Adds content blocks; see the ``body_*`` selector builders in enums."""
        return self._select(
            "show-blocks",
            [b if isinstance(b, BlockSelector) else Block(b) for b in blocks],
        )

    def show_section(self, show_section: bool = True) -> ContentQuery:
        return self._set("show-section", "true" if show_section else "false")

    def date_from(self, year: int, month: int, day: int) -> ContentQuery:
        """Only content on or after this date. Dropped if not a calendar date."""
        return self._set_or_drop("from-date", format_date(year, month, day))

    def date_to(self, year: int, month: int, day: int) -> ContentQuery:
        """Only content on or before this date. Dropped if not a calendar date."""
        return self._set_or_drop("to-date", format_date(year, month, day))

    def datetime_from(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        utc_offset_hours: int = 0,
    ) -> ContentQuery:
        return self._set_or_drop(
            "from-date",
            format_datetime(year, month, day, hour, minute, second, utc_offset_hours),
        )

    def datetime_to(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        utc_offset_hours: int = 0,
    ) -> ContentQuery:
        return self._set_or_drop(
            "to-date",
            format_datetime(year, month, day, hour, minute, second, utc_offset_hours),
        )

    def section(self, section: str) -> ContentQuery:
        return self._set("section", section)

    def reference(self, reference: str) -> ContentQuery:
        return self._set("reference", reference)

    def reference_type(self, reference_type: str) -> ContentQuery:
        return self._set("reference-type", reference_type)

    def tag(self, tag: str) -> ContentQuery:
        return self._set("tag", tag)

    def ids(self, ids: str) -> ContentQuery:
        return self._set("ids", ids)

    def production_office(self, production_office: str) -> ContentQuery:
        return self._set("production-office", production_office)

    def lang(self, lang: str) -> ContentQuery:
        """ISO language code, e.g. en or fr."""
        return self._set("lang", lang)

    def star_rating(self, star_rating: int) -> ContentQuery:
        """Only reviews with this rating. Dropped unless between 1 and 5."""
        try:
            value = str(StarRating(star_rating).value)
        except ValueError:
            value = None
        return self._set_or_drop("star-rating", value)

    def tag_type(self, tag_type: TagType) -> ContentQuery:
        """Only tags of this type (tags endpoint)."""
        return self._set("type", TagType(tag_type).value)

    @property
    def current_endpoint(self) -> Endpoint:
        return self._endpoint

    def path(self) -> str:
        """Returns the URL path for the selected endpoint."""
        if self._endpoint == Endpoint.SINGLE_ITEM:
            item_id = self._params.get(SEARCH_PARAM)
            if not item_id:
                raise MissingQueryParameterError(SEARCH_PARAM)
            return quote(item_id.strip("/"), safe="/")
        return _ENDPOINT_PATHS[self._endpoint]

    def params(self) -> list[tuple[str, str]]:
        """
        Returns the parameters that were set, sorted by name.

        On the single-item endpoint the item id is part of the path, not a
        parameter. The API key is never included.
        """
        rendered = dict(self._params)
        if self._endpoint == Endpoint.SINGLE_ITEM:
            rendered.pop(SEARCH_PARAM, None)
        for name, selection in self._selections.items():
            if selection:
                rendered[name] = render_selection(selection)
        return sorted(rendered.items())

    def query_string(self) -> str:
        return urlencode(self.params())

    def build_request(self) -> httpx.Request:
        """Renders the query into a GET request carrying the API key."""
        return self._client.build_request(self)

    async def send(self) -> SearchResponse:
        """
        Sends the request and decodes the response.

        The accumulated parameters are cleared afterwards, whether or not the
        request succeeded.
        """
        try:
            return await self._client.send(self)
        finally:
            self._params.clear()
            self._selections.clear()

    def __repr__(self) -> str:
        return f"ContentQuery(endpoint={self._endpoint.value!r}, params={self.params()!r})"

    def _set(self, name: str, value: str) -> ContentQuery:
        self._params[name] = value
        return self

    def _set_or_drop(self, name: str, value: str | None) -> ContentQuery:
        if value is None:
            logger.debug("Dropping invalid value for '%s'", name)
            self._params.pop(name, None)
            return self
        return self._set(name, value)

    def _select(self, name: str, items: list[object]) -> ContentQuery:
        self._selections[name] = merge_selection(self._selections.get(name, []), items)
        return self
