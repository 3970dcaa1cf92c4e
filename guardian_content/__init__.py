"""
Client library for the Guardian's content API.

Queries are built by chaining methods on a ContentQuery and sent with a
single awaited call; responses are decoded into pydantic models.

    async with GuardianContentClient("your-api-key") as client:
        response = await (
            client.search("Elections")
            .page_size(10)
            .show_fields(ContentField.BYLINE, ContentField.LAST_MODIFIED)
            .order_by(OrderBy.NEWEST)
            .send()
        )
"""

from guardian_content.clients import GuardianContentClient, create_client
from guardian_content.data_models.enums import (
    Block,
    ContentField,
    Endpoint,
    OrderBy,
    OrderDate,
    StarRating,
    TagType,
    UseDate,
)
from guardian_content.data_models.response import SearchResponse, SearchResult
from guardian_content.exceptions import (
    ApiError,
    DecodeError,
    GuardianContentError,
    MissingQueryParameterError,
    NetworkError,
)
from guardian_content.query import ContentQuery
from guardian_content.version import __version__

__all__ = [
    "ApiError",
    "Block",
    "ContentField",
    "ContentQuery",
    "DecodeError",
    "Endpoint",
    "GuardianContentClient",
    "GuardianContentError",
    "MissingQueryParameterError",
    "NetworkError",
    "OrderBy",
    "OrderDate",
    "SearchResponse",
    "SearchResult",
    "StarRating",
    "TagType",
    "UseDate",
    "__version__",
    "create_client",
]
