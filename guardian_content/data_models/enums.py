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
Closed sets of values accepted by the content API.

Member values are the exact strings sent on the wire.
"""

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict

ALL = "all"


class Endpoint(str, Enum):
    CONTENT = "content"
    TAGS = "tags"
    SECTIONS = "sections"
    EDITIONS = "editions"
    SINGLE_ITEM = "single-item"


class OrderBy(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    RELEVANCE = "relevance"


class OrderDate(str, Enum):
    PUBLISHED = "published"
    NEWSPAPER_EDITION = "newspaper-edition"
    LAST_MODIFIED = "last-modified"


class UseDate(str, Enum):
    """Which date the from/to filters apply to. Defaults to PUBLISHED upstream."""

    PUBLISHED = "published"
    FIRST_PUBLICATION = "first-publication"
    NEWSPAPER_EDITION = "newspaper-edition"
    LAST_MODIFIED = "last-modified"


class ContentField(str, Enum):
    """Optional per-item fields for show-fields and query-fields."""

    TRAIL_TEXT = "trailText"
    HEADLINE = "headline"
    SHOW_IN_RELATED_CONTENT = "showInRelatedContent"
    BODY = "body"
    BODY_TEXT = "bodyText"
    LAST_MODIFIED = "lastModified"
    HAS_STORY_PACKAGE = "hasStoryPackage"
    SCORE = "score"
    STANDFIRST = "standfirst"
    SHORT_URL = "shortUrl"
    BYLINE = "byline"
    THUMBNAIL = "thumbnail"
    WORDCOUNT = "wordcount"
    COMMENTABLE = "commentable"
    IS_PREMODERATED = "isPremoderated"
    ALLOW_UGC = "allowUgc"
    PUBLICATION = "publication"
    INTERNAL_PAGE_CODE = "internalPageCode"
    PRODUCTION_OFFICE = "productionOffice"
    SHOULD_HIDE_ADVERTS = "shouldHideAdverts"
    LIVE_BLOGGING_NOW = "liveBloggingNow"
    COMMENT_CLOSE_DATE = "commentCloseDate"
    STAR_RATING = "starRating"
    # Overrides every other field.
    ALL = "all"


class TagType(str, Enum):
    BLOG = "blog"
    CONTRIBUTOR = "contributor"
    KEYWORD = "keyword"
    NEWSPAPER_BOOK = "newspaper-book"
    NEWSPAPER_BOOK_SECTION = "newspaper-book-section"
    PUBLICATION = "publication"
    SERIES = "series"
    TONE = "tone"
    TYPE = "type"
    # Overrides every other tag type.
    ALL = "all"


class StarRating(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5


class Block(str, Enum):
    """Fixed block selectors for show-blocks.

    Selectors carrying an id, a limit or a timestamp are built with the
    ``body_*`` functions below.
    """

    MAIN = "main"
    BODY = "body"
    ALL = "all"
    BODY_LATEST = "body:latest"
    BODY_OLDEST = "body:oldest"
    BODY_KEY_EVENTS = "body:key-events"


class BlockSelector(BaseModel):
    """A parameterized show-blocks selector."""

    model_config = ConfigDict(frozen=True)

    value: str

    def __str__(self) -> str:
        return self.value


def body_latest(limit: int) -> BlockSelector:
    return BlockSelector(value=f"{Block.BODY_LATEST.value}:{limit}")


def body_oldest(limit: int) -> BlockSelector:
    return BlockSelector(value=f"{Block.BODY_OLDEST.value}:{limit}")


def body_block_id(block_id: str) -> BlockSelector:
    """Only the block with the given id."""
    return BlockSelector(value=f"body:{block_id}")


def body_around_block_id(block_id: str, limit: int | None = None) -> BlockSelector:
    """The given block and ``limit`` blocks either side of it (20 upstream by default)."""
    if limit is None:
        return BlockSelector(value=f"body:around:{block_id}")
    return BlockSelector(value=f"body:around:{block_id}:{limit}")


def body_published_since(timestamp_ms: int) -> BlockSelector:
    """Blocks published since a Unix timestamp in milliseconds."""
    return BlockSelector(value=f"body:published-since:{timestamp_ms}")
