"""
Configuration management for the Mailjet REST client.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax.
Credentials default to the MJ_APIKEY_PUBLIC / MJ_APIKEY_PRIVATE variables.
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

from mailjet.exceptions import InvalidConfigurationError
from mailjet.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.mailjet.com/v3"
API_KEY_ENV = "MJ_APIKEY_PUBLIC"
API_SECRET_ENV = "MJ_APIKEY_PRIVATE"
VALID_DEBUG_MODES = ["none", "verbose", "nocall"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.
    
    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}
    
    Examples:
        "${MJ_APIKEY_PUBLIC}" -> value of MJ_APIKEY_PUBLIC env var
        "${MAILJET_URL:https://api.mailjet.com/v3}" -> value or the default
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'
        
        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)
        
        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class ApiConfig:
    """Connection settings for the Mailjet API."""
    
    base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    api_secret: str = ""
    timeout: float = 30
    user_agent: str = ""


@dataclass
class DebugConfig:
    """Debug mode: none, verbose or nocall."""
    
    mode: str = "none"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    
    level: str = "INFO"
    file: str = ""
    format: str = "console"  # "console" or "json"


@dataclass
class MailjetConfig:
    """Main client configuration."""
    
    api: ApiConfig = field(default_factory=ApiConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.mailjet/config.yaml")


def get_default_config() -> MailjetConfig:
    """
    Get default configuration, with credentials taken from the environment.
    
    Returns:
        MailjetConfig: Default configuration object
    """
    return MailjetConfig(
        api=ApiConfig(
            base_url=DEFAULT_BASE_URL,
            api_key=os.environ.get(API_KEY_ENV, ""),
            api_secret=os.environ.get(API_SECRET_ENV, ""),
        ),
        debug=DebugConfig(),
        logging=LoggingConfig(),
    )


def load_config(config_path: Optional[str] = None) -> MailjetConfig:
    """
    Load configuration from YAML file with validation.
    
    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.
    
    Args:
        config_path: Path to configuration file. If None, uses default path.
    
    Returns:
        MailjetConfig: Loaded and validated configuration
    
    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()
    
    config_path = os.path.expanduser(config_path)
    
    if not os.path.exists(config_path):
        logger.debug(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()
    
    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e
    
    if config_data is None:
        logger.debug(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()
    
    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping"
        )
    
    config_data = _expand_env_vars(config_data)
    
    try:
        config = _build_config_from_dict(config_data)
        _validate_config(config)
    except InvalidConfigurationError:
        raise
    except (TypeError, ValueError, AttributeError) as e:
        logger.error(f"Invalid configuration in '{config_path}': {e}")
        raise InvalidConfigurationError(
            f"Invalid configuration in '{config_path}': {e}"
        ) from e
    
    logger.debug(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _build_config_from_dict(config_data: Dict[str, Any]) -> MailjetConfig:
    """
    Build MailjetConfig from dictionary loaded from YAML.
    
    Merges user configuration with defaults.
    """
    default_config = get_default_config()
    
    api_data = config_data.get('api') or {}
    api = ApiConfig(
        base_url=str(api_data.get('base_url', default_config.api.base_url)),
        api_key=str(api_data.get('api_key') or default_config.api.api_key),
        api_secret=str(api_data.get('api_secret') or default_config.api.api_secret),
        timeout=float(api_data.get('timeout', default_config.api.timeout)),
        user_agent=str(api_data.get('user_agent', default_config.api.user_agent)),
    )
    
    debug_data = config_data.get('debug') or {}
    debug = DebugConfig(
        mode=str(debug_data.get('mode', default_config.debug.mode)).lower(),
    )
    
    logging_data = config_data.get('logging') or {}
    logging = LoggingConfig(
        level=str(logging_data.get('level', default_config.logging.level)),
        file=os.path.expanduser(str(logging_data.get('file', default_config.logging.file))),
        format=str(logging_data.get('format', default_config.logging.format)),
    )
    
    return MailjetConfig(api=api, debug=debug, logging=logging)


def _validate_config(config: MailjetConfig) -> None:
    """
    Validate configuration values.
    
    Credentials are not required here; the client rejects missing ones
    when it is constructed.
    
    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if not config.api.base_url:
        raise InvalidConfigurationError("api.base_url cannot be empty")
    
    if config.api.timeout <= 0:
        raise InvalidConfigurationError(
            f"api.timeout must be positive, got {config.api.timeout}"
        )
    
    if config.debug.mode not in VALID_DEBUG_MODES:
        raise InvalidConfigurationError(
            f"debug.mode must be one of {VALID_DEBUG_MODES}, "
            f"got '{config.debug.mode}'"
        )
    
    if config.logging.level.upper() not in VALID_LOG_LEVELS:
        raise InvalidConfigurationError(
            f"logging level must be one of {VALID_LOG_LEVELS}, "
            f"got '{config.logging.level}'"
        )
    
    if config.logging.format not in ("console", "json"):
        raise InvalidConfigurationError(
            f"logging format must be 'console' or 'json', got '{config.logging.format}'"
        )
