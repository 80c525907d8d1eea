"""Tests for gateway response parsing and success detection."""

import httpx
import pytest

from eventreg.sms.responses import (
    MalformedResponse,
    ObjectResponse,
    StringResponse,
    parse_provider_response,
)


class TestStringResponse:
    def test_message_id_is_success(self):
        assert StringResponse("MessageId: 12345").ok

    def test_success_word_is_success(self):
        assert StringResponse("Message sent success").ok

    def test_python_style_campid(self):
        response = StringResponse("{'campid':'98765'}")
        assert response.ok
        assert response.campid == "98765"

    def test_json_style_campid(self):
        assert StringResponse('{"campid":"A1B2"}').campid == "A1B2"

    def test_error_text_is_failure(self):
        response = StringResponse("Invalid API key")
        assert not response.ok
        assert response.campid is None


class TestObjectResponse:
    def test_error_code_sentinel(self):
        assert ObjectResponse({"ErrorCode": "000", "ErrorMessage": "Done"}).ok

    def test_success_in_error_message(self):
        assert ObjectResponse({"ErrorCode": "13", "ErrorMessage": "SUCCESS"}).ok

    def test_campid_key(self):
        response = ObjectResponse({"campid": 4711})
        assert response.ok
        assert response.campid == "4711"

    def test_error_object_is_failure(self):
        assert not ObjectResponse({"ErrorCode": "21", "ErrorMessage": "Invalid sender"}).ok

    def test_non_string_error_message(self):
        assert not ObjectResponse({"ErrorMessage": None}).ok

    def test_null_campid_key_present(self):
        response = ObjectResponse({"campid": None})
        assert response.ok
        assert response.campid is None


class TestParseProviderResponse:
    def test_json_object(self):
        parsed = parse_provider_response(httpx.Response(200, json={"ErrorCode": "000"}))
        assert isinstance(parsed, ObjectResponse)
        assert parsed.payload == {"ErrorCode": "000"}

    def test_plain_text(self):
        parsed = parse_provider_response(httpx.Response(200, text="MessageId:1"))
        assert isinstance(parsed, StringResponse)
        assert parsed.payload == "MessageId:1"

    def test_json_string_body(self):
        parsed = parse_provider_response(httpx.Response(200, json="success"))
        assert isinstance(parsed, StringResponse)
        assert parsed.ok

    @pytest.mark.parametrize(
        "body",
        [
            [1, 2],
            ["success"],
            [{"ErrorMessage": "failed success check"}],
            [{"campid": "1"}],
            0,
            True,
        ],
    )
    def test_other_json_values_are_malformed(self, body):
        parsed = parse_provider_response(httpx.Response(200, json=body))
        assert isinstance(parsed, MalformedResponse)
        assert not parsed.ok
        assert parsed.campid is None
        assert parsed.payload == body

    def test_json_null_is_malformed(self):
        parsed = parse_provider_response(
            httpx.Response(200, content=b"null", headers={"content-type": "application/json"})
        )
        assert isinstance(parsed, MalformedResponse)
        assert not parsed.ok
        assert parsed.payload is None
