"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Catalog of Mailjet v3 REST resources.

Maps logical resource names to the path segment used on the wire. The
client itself only needs the resolved path; this table is what callers and
the CLI use to find it.
"""

from typing import Dict, List

from mailjet.exceptions import UnknownResourceError


class Resource:
    """Wire path segments for the Mailjet v3 REST resources."""

    # Account
    APIKEY = "apikey"
    APIKEY_ACCESS = "apikeyaccess"
    APIKEY_TOTALS = "apikeytotals"
    APITOKEN = "apitoken"
    MYPROFILE = "myprofile"
    USER = "user"

    # Contacts
    CONTACT = "contact"
    CONTACT_DATA = "contactdata"
    CONTACT_FILTER = "contactfilter"
    CONTACT_HISTORY_DATA = "contacthistorydata"
    CONTACT_METADATA = "contactmetadata"
    CONTACTSLIST = "contactslist"
    CONTACTSLIST_SIGNUP = "contactslistsignup"
    LIST_RECIPIENT = "listrecipient"
    CSV_IMPORT = "csvimport"

    # Campaigns
    CAMPAIGN = "campaign"
    CAMPAIGN_DRAFT = "campaigndraft"
    NEWSLETTER = "newsletter"
    TEMPLATE = "template"

    # Messages
    MESSAGE = "message"
    MESSAGE_HISTORY = "messagehistory"
    MESSAGE_INFORMATION = "messageinformation"
    MESSAGE_STATE = "messagestate"
    SEND = "send"

    # Senders and domains
    SENDER = "sender"
    DNS = "dns"
    PARSEROUTE = "parseroute"
    EVENT_CALLBACK_URL = "eventcallbackurl"

    # Statistics
    BOUNCE_STATISTICS = "bouncestatistics"
    CAMPAIGN_STATISTICS = "campaignstatistics"
    CLICK_STATISTICS = "clickstatistics"
    CONTACT_STATISTICS = "contactstatistics"
    DOMAIN_STATISTICS = "domainstatistics"
    GEO_STATISTICS = "geostatistics"
    LIST_RECIPIENT_STATISTICS = "listrecipientstatistics"
    LIST_STATISTICS = "liststatistics"
    MESSAGE_SENT_STATISTICS = "messagesentstatistics"
    MESSAGE_STATISTICS = "messagestatistics"
    OPEN_INFORMATION = "openinformation"
    OPEN_STATISTICS = "openstatistics"
    SENDER_STATISTICS = "senderstatistics"
    TOPLINK_CLICKED = "toplinkclicked"
    USERAGENT_STATISTICS = "useragentstatistics"


RESOURCES: Dict[str, str] = {
    name.lower(): value
    for name, value in vars(Resource).items()
    if name.isupper()
}


def resolve_resource(name: str) -> str:
    """
    Resolve a logical resource name to its wire path segment.
    
    Accepts either the constant name (``"contact_data"``) or the wire
    segment itself (``"contactdata"``), case-insensitively.
    
    Raises:
        UnknownResourceError: If the name is not in the catalog.
    """
    key = name.strip().lower().replace("-", "_")
    if key in RESOURCES:
        return RESOURCES[key]
    if key in RESOURCES.values():
        return key
    raise UnknownResourceError(f"Unknown Mailjet resource: '{name}'")


def list_resources() -> List[str]:
    """Return all wire path segments in the catalog, sorted."""
    return sorted(set(RESOURCES.values()))
