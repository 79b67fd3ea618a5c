"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

Command-line interface for the Mailjet REST client.
"""
