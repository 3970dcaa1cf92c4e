import json
from datetime import datetime, timezone

import pytest
from guardian_content.data_models.response import (
    ApiEnvelope,
    SearchResponse,
    decode_response,
)
from guardian_content.exceptions import DecodeError


class TestDecodeResponse:
    def test_decodes_search_results(self, search_payload):
        response = decode_response(json.dumps(search_payload))

        assert isinstance(response, SearchResponse)
        assert response.status == "ok"
        assert response.user_tier == "developer"
        assert response.current_page == 1
        assert response.pages == 1
        assert len(response.results) == 2

        first = response.results[0]
        assert first.id == "politics/2024/jul/05/general-election-results"
        assert first.web_title == "General election results"
        assert first.web_publication_date == datetime(2024, 7, 5, 6, 0, tzinfo=timezone.utc)
        assert first.is_hosted is False
        assert first.fields.byline == "Jane Doe"
        assert first.fields.short_url == "https://www.theguardian.com/p/abc12"

    def test_missing_optional_field_is_absent(self, search_payload):
        response = decode_response(json.dumps(search_payload))

        second = response.results[1]
        assert second.fields.byline is None
        assert second.pillar_id is None
        assert second.tags is None
        assert second.blocks is None

    def test_negative_pages_sentinel_is_preserved(self):
        body = {"response": {"status": "ok", "currentPage": 1, "pages": -1, "results": []}}
        response = decode_response(json.dumps(body))
        assert response.pages == -1

    def test_unknown_keys_are_ignored(self, search_payload):
        search_payload["response"]["somethingNew"] = {"nested": True}
        search_payload["response"]["results"][0]["newAttribute"] = 42
        response = decode_response(json.dumps(search_payload))
        assert response.results[0].id == "politics/2024/jul/05/general-election-results"

    def test_missing_results_is_absent(self):
        response = decode_response(b'{"response": {"status": "ok", "total": 0}}')
        assert response.results is None

    def test_missing_required_status_fails(self):
        with pytest.raises(DecodeError):
            decode_response(b'{"response": {"total": 0}}')

    def test_missing_required_result_key_fails(self, search_payload):
        del search_payload["response"]["results"][0]["webUrl"]
        with pytest.raises(DecodeError):
            decode_response(json.dumps(search_payload))

    def test_malformed_timestamp_fails(self, search_payload):
        search_payload["response"]["results"][0]["webPublicationDate"] = "yesterday"
        with pytest.raises(DecodeError):
            decode_response(json.dumps(search_payload))

    @pytest.mark.parametrize(
        "value",
        [
            1720000000,
            "1720000000",
            "2024-07-05",
            "2024-07-05T06:00:00",
        ],
    )
    def test_non_timestamp_values_fail(self, search_payload, value):
        """Unix times, date-only and offset-less strings are not accepted."""
        search_payload["response"]["results"][0]["webPublicationDate"] = value
        with pytest.raises(DecodeError):
            decode_response(json.dumps(search_payload))

    def test_timestamp_with_offset_is_accepted(self, search_payload):
        search_payload["response"]["results"][0]["webPublicationDate"] = (
            "2024-07-05T07:00:00+01:00"
        )
        result = decode_response(json.dumps(search_payload)).results[0]
        assert result.web_publication_date == datetime(2024, 7, 5, 6, 0, tzinfo=timezone.utc)

    def test_malformed_field_timestamp_fails(self, search_payload):
        search_payload["response"]["results"][0]["fields"]["lastModified"] = "not a date"
        with pytest.raises(DecodeError):
            decode_response(json.dumps(search_payload))

    def test_invalid_json_fails(self):
        with pytest.raises(DecodeError):
            decode_response(b"<html>Service Unavailable</html>")

    def test_envelope_without_response_fails(self):
        with pytest.raises(DecodeError, match="Unauthorized"):
            decode_response(b'{"message": "Unauthorized"}')

    def test_error_status(self):
        response = decode_response(
            b'{"response": {"status": "error", "message": "page-size must be 0-200"}}'
        )
        assert response.is_error
        assert response.message == "page-size must be 0-200"


class TestModels:
    def test_numeric_field_values_become_strings(self):
        envelope = ApiEnvelope.model_validate(
            {
                "response": {
                    "status": "ok",
                    "results": [
                        {
                            "id": "film/review",
                            "webTitle": "A review",
                            "webUrl": "https://www.theguardian.com/film/review",
                            "fields": {"wordcount": 812, "starRating": "4"},
                        }
                    ],
                }
            }
        )
        fields = envelope.response.results[0].fields
        assert fields.wordcount == "812"
        assert fields.star_rating == "4"

    def test_tags_section_and_blocks(self):
        body = {
            "response": {
                "status": "ok",
                "content": {
                    "id": "world/live/1",
                    "webTitle": "Live",
                    "webUrl": "https://www.theguardian.com/world/live/1",
                    "tags": [
                        {
                            "id": "profile/jane-doe",
                            "type": "contributor",
                            "webTitle": "Jane Doe",
                            "webUrl": "https://www.theguardian.com/profile/jane-doe",
                            "firstName": "Jane",
                            "lastName": "Doe",
                        }
                    ],
                    "section": {
                        "id": "world",
                        "webTitle": "World news",
                        "webUrl": "https://www.theguardian.com/world",
                        "editions": [
                            {
                                "id": "uk/world",
                                "webTitle": "World news",
                                "webUrl": "https://www.theguardian.com/uk/world",
                                "code": "uk",
                            }
                        ],
                    },
                    "blocks": {
                        "main": {"id": "main-1", "bodyHtml": "<p>Main</p>"},
                        "body": [
                            {
                                "id": "block-1",
                                "bodyTextSummary": "First update",
                                "publishedDate": "2024-07-06T09:00:00Z",
                            }
                        ],
                        "totalBodyBlocks": 1,
                    },
                },
            }
        }
        content = decode_response(json.dumps(body)).content

        assert content.tags[0].first_name == "Jane"
        assert content.section.editions[0].id == "uk/world"
        assert content.blocks.main.body_html == "<p>Main</p>"
        assert content.blocks.body[0].published_date == datetime(
            2024, 7, 6, 9, 0, tzinfo=timezone.utc
        )
        assert content.blocks.total_body_blocks == 1

    def test_model_dump_excludes_none_and_uses_field_names(self, search_payload):
        response = decode_response(json.dumps(search_payload))
        dumped = response.model_dump()
        assert "content" not in dumped
        assert "byline" not in dumped["results"][1]["fields"]
        assert dumped["current_page"] == 1

    def test_model_dump_by_alias(self, search_payload):
        response = decode_response(json.dumps(search_payload))
        assert response.model_dump(by_alias=True)["currentPage"] == 1
