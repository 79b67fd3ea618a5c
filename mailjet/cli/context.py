"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Mailjet REST client, a product of Garudex Labs

CLI context for the Mailjet REST client.

Provides shared context object and decorators for CLI commands.
"""

import click

from mailjet.sdk.client import MailjetClient


class CLIContext:
    """Context object for CLI commands."""
    
    def __init__(self):
        self.config = None
        self.config_path = None
        self.client: MailjetClient = None


pass_context = click.make_pass_decorator(CLIContext, ensure=True)
