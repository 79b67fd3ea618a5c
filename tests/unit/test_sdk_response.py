"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Tests for the normalized response.
"""

from dataclasses import FrozenInstanceError

import pytest

from mailjet.exceptions import ResponseParseError
from mailjet.sdk.response import MailjetResponse


class TestMailjetResponse:
    @pytest.mark.parametrize("status", [200, 201, 204, 404, 500])
    def test_empty_text_becomes_empty_object(self, status):
        response = MailjetResponse.from_text(status, "")
        assert response.status_code == status
        assert response.body == {}

    def test_parses_json(self):
        response = MailjetResponse.from_text(200, '{"Count": 1, "Data": [{"ID": 5}], "Total": 1}')
        assert response.body == {"Count": 1, "Data": [{"ID": 5}], "Total": 1}

    def test_json_null_becomes_empty_object(self):
        assert MailjetResponse.from_text(200, "null").body == {}

    def test_none_body_becomes_empty_object(self):
        assert MailjetResponse(200, None).body == {}

    def test_invalid_json_raises(self):
        with pytest.raises(ResponseParseError) as exc_info:
            MailjetResponse.from_text(502, "<html>Bad Gateway</html>")
        assert exc_info.value.status_code == 502
        assert exc_info.value.text == "<html>Bad Gateway</html>"

    def test_is_frozen(self):
        response = MailjetResponse(200, {})
        with pytest.raises(FrozenInstanceError):
            response.status_code = 500

    def test_dry_run_flag(self):
        assert MailjetResponse(0, {"url": "x"}).is_dry_run is True
        assert MailjetResponse(200, {}).is_dry_run is False

    def test_str_renders_status_and_body(self):
        assert str(MailjetResponse(201, {"ID": 42})) == '201 {"ID": 42}'

    def test_to_dict(self):
        assert MailjetResponse(201, {"ID": 42}).to_dict() == {"status_code": 201, "body": {"ID": 42}}
