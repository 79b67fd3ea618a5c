"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Tests for the resource catalog.
"""

import pytest

from mailjet.exceptions import UnknownResourceError
from mailjet.resources import RESOURCES, Resource, list_resources, resolve_resource


class TestResourceCatalog:
    def test_constants(self):
        assert Resource.CONTACT == "contact"
        assert Resource.CONTACTSLIST == "contactslist"
        assert Resource.LIST_RECIPIENT == "listrecipient"

    def test_mapping_keys_are_lowercase_constant_names(self):
        assert RESOURCES["contact_data"] == "contactdata"
        assert RESOURCES["contactslist"] == "contactslist"

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("contact", "contact"),
            ("CONTACTSLIST", "contactslist"),
            ("contact_data", "contactdata"),
            ("contact-data", "contactdata"),
            ("contactdata", "contactdata"),
            (" Campaign ", "campaign"),
        ],
    )
    def test_resolve(self, name, expected):
        assert resolve_resource(name) == expected

    def test_resolve_unknown(self):
        with pytest.raises(UnknownResourceError):
            resolve_resource("spaceship")

    def test_list_resources_sorted_and_unique(self):
        names = list_resources()
        assert names == sorted(set(names))
        assert "contact" in names
