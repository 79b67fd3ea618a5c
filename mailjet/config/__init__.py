"""
Configuration management for the Mailjet REST client.
"""

from mailjet.config.settings import (
    ApiConfig,
    DebugConfig,
    LoggingConfig,
    MailjetConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "ApiConfig",
    "DebugConfig",
    "LoggingConfig",
    "MailjetConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
