"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Tests for request description and URL construction.
"""

import json
from dataclasses import FrozenInstanceError

import pytest

from mailjet.exceptions import EncodingError, InvalidUrlError
from mailjet.sdk.request import (
    MailjetRequest,
    build_path,
    build_payload,
    build_query_string,
    query_params,
)


class TestMailjetRequest:
    def test_defaults(self):
        request = MailjetRequest("contact")
        assert request.id is None
        assert request.filters == ()
        assert request.body is None
        assert request.content_type == "application/json"

    def test_filters_list_is_frozen_to_tuple(self):
        request = MailjetRequest("contact", filters=[("a", 1), ("b", 2)])
        assert request.filters == (("a", 1), ("b", 2))

    def test_mapping_filters_become_pairs(self):
        request = MailjetRequest("contactslist", filters={"id": 1, "Limit": 5})
        assert request.filters == (("id", 1), ("Limit", 5))
        assert build_query_string(request) == "?id=1&Limit=5"

    @pytest.mark.parametrize("filters", [["id"], [("a", 1, 2)], [None], ["ab"]])
    def test_malformed_filter_entry_raises(self, filters):
        with pytest.raises(TypeError):
            MailjetRequest("contactslist", filters=filters)

    def test_filter_returns_new_request(self):
        base = MailjetRequest("contactslist")
        filtered = base.filter("Limit", 10).filter("Offset", 20)
        assert base.filters == ()
        assert filtered.filters == (("Limit", 10), ("Offset", 20))

    def test_is_immutable(self):
        request = MailjetRequest("contact")
        with pytest.raises(FrozenInstanceError):
            request.resource = "campaign"

    def test_with_id_and_body(self):
        request = MailjetRequest("contactslist").with_id(7).with_body({"Name": "VIP"})
        assert request.id == 7
        assert request.body == {"Name": "VIP"}

    def test_payload_defaults_to_empty_object(self):
        assert MailjetRequest("contactslist").payload == {}

    def test_build_url_and_query_string_delegate(self):
        request = MailjetRequest("contact", id=3).filter("a", 1)
        assert request.build_url() == "/contact/3"
        assert request.query_string() == "?a=1"


class TestBuildPath:
    def test_resource_only(self):
        assert build_path(MailjetRequest("contactslist")) == "/contactslist"

    def test_with_string_id(self):
        assert build_path(MailjetRequest("contact", id="1")) == "/contact/1"

    def test_with_numeric_id(self):
        assert build_path(MailjetRequest("contact", id=42)) == "/contact/42"

    def test_id_zero_is_kept(self):
        assert build_path(MailjetRequest("contact", id=0)) == "/contact/0"

    def test_filters_do_not_affect_path(self):
        assert build_path(MailjetRequest("contact").filter("id", 1)) == "/contact"

    def test_empty_resource_raises(self):
        with pytest.raises(InvalidUrlError):
            build_path(MailjetRequest(""))


class TestBuildQueryString:
    def test_no_filters_is_empty(self):
        assert build_query_string(MailjetRequest("contact")) == ""

    def test_order_is_preserved(self):
        request = MailjetRequest("contact", filters=[("a", 1), ("b", 2)])
        assert build_query_string(request) == "?a=1&b=2"

    def test_reverse_order_is_preserved(self):
        request = MailjetRequest("contact", filters=[("b", 2), ("a", 1)])
        assert build_query_string(request) == "?b=2&a=1"

    def test_duplicate_keys_are_kept(self):
        request = MailjetRequest("contact").filter("a", 1).filter("b", 2).filter("a", 3)
        assert build_query_string(request) == "?a=1&b=2&a=3"

    def test_reserved_characters_are_encoded(self):
        request = MailjetRequest("contact").filter("Email", "john+doe@example.com").filter("q", "a b&c=d")
        assert build_query_string(request) == "?Email=john%2Bdoe%40example.com&q=a+b%26c%3Dd"

    def test_non_ascii_is_utf8_encoded(self):
        request = MailjetRequest("contact").filter("Name", "café")
        assert build_query_string(request) == "?Name=caf%C3%A9"

    def test_booleans_and_none(self):
        request = MailjetRequest("contact").filter("IsExcluded", True).filter("Blocked", False).filter("x", None)
        assert build_query_string(request) == "?IsExcluded=true&Blocked=false&x="

    def test_unencodable_value_raises(self):
        request = MailjetRequest("contact").filter("Name", "bad\ud800")
        with pytest.raises(EncodingError):
            build_query_string(request)


class TestQueryParams:
    def test_values_rendered_as_text(self):
        request = MailjetRequest("contact", filters=[("Limit", 10), ("Limit", 20)])
        assert query_params(request) == [("Limit", "10"), ("Limit", "20")]

    def test_unencodable_key_raises(self):
        with pytest.raises(EncodingError):
            query_params(MailjetRequest("contact").filter("\udfff", 1))


class TestBuildPayload:
    def test_serializes_body(self):
        payload = build_payload(MailjetRequest("contactslist", body={"Name": "foo"}))
        assert json.loads(payload.decode("utf-8")) == {"Name": "foo"}

    def test_absent_body_is_empty_object(self):
        assert build_payload(MailjetRequest("contactslist")) == b"{}"

    def test_non_ascii_body_is_utf8(self):
        payload = build_payload(MailjetRequest("contactslist", body={"Name": "élan"}))
        assert payload == '{"Name": "élan"}'.encode("utf-8")

    def test_unserializable_body_raises(self):
        with pytest.raises(EncodingError):
            build_payload(MailjetRequest("contactslist", body={"when": object()}))

    def test_unencodable_body_raises(self):
        with pytest.raises(EncodingError):
            build_payload(MailjetRequest("contactslist", body={"Name": "bad\ud800"}))
