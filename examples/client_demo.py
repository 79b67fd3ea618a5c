#!/usr/bin/env python
"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Demonstration of the Mailjet client debug modes.

This script shows how to:
1. Initialize the client from MJ_APIKEY_PUBLIC / MJ_APIKEY_PRIVATE
2. Preview calls in dry-run mode without touching the network
3. Print traffic in verbose mode against an in-memory transport
"""

import os

from mailjet import MailjetClient, MailjetRequest, Resource
from mailjet.sdk.adapters import MockAdapter


def main():
    """Run client demonstration."""
    api_key = os.environ.get("MJ_APIKEY_PUBLIC", "demo-key")
    api_secret = os.environ.get("MJ_APIKEY_PRIVATE", "demo-secret")

    print("=" * 60)
    print("Dry run (NOCALL_DEBUG)")
    print("=" * 60)
    client = MailjetClient(api_key, api_secret, debug=MailjetClient.NOCALL_DEBUG)
    print(client.get(MailjetRequest(Resource.CONTACT, id=1)))
    print(client.post(MailjetRequest(Resource.CONTACTSLIST, body={"Name": "VIP"})))
    print(client.delete(MailjetRequest(Resource.CONTACTSLIST).filter("id", 1)))

    print()
    print("=" * 60)
    print("Verbose (VERBOSE_DEBUG) against a mock transport")
    print("=" * 60)
    adapter = MockAdapter()
    adapter.add_response("POST", client.base_url + "/contactslist", 201, '{"Count": 1, "Data": [{"ID": 42}]}')
    with MailjetClient(api_key, api_secret, adapter=adapter) as verbose_client:
        verbose_client.set_debug(MailjetClient.VERBOSE_DEBUG)
        response = verbose_client.post(MailjetRequest(Resource.CONTACTSLIST, body={"Name": "VIP"}))
        print(response)


if __name__ == "__main__":
    main()
