# Standard library imports
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

# Third-party imports
from jsonschema import Draft7Validator

from itemid_browse.config.schema import CONFIGURATION_SCHEMA
from itemid_browse.domain.models import ClientConfiguration, DaClientConfiguration
from itemid_browse.processing.shared.constants import (
    DA_CONFIG_KEYS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SEPARATOR_CHARS,
    ENV_GROUP_PREFIX,
    ENV_ITEM_SEPARATOR,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    ENV_SEPARATOR_CHARS,
)
from itemid_browse.processing.shared.error_handling import ConfigurationError

# Base directory of the package (``config`` lives one level below it)
ROOT_DIR = Path(__file__).resolve().parents[1]


def resolve_log_dir(value: Optional[str]) -> Optional[Path]:
    """Resolve a log directory setting; relative paths are taken from ROOT_DIR."""
    if not value:
        return None
    path = Path(value).expanduser()
    return path if path.is_absolute() else ROOT_DIR / path


# Log files go here when a file handler is wanted; None keeps logging on the console
LOG_DIR = resolve_log_dir(os.environ.get(ENV_LOG_DIR))
LOG_LEVEL = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()


def build_parser_config(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Build a raw configuration record from environment variables.

    The group prefix and item separator are only included when set, so an
    environment without them describes the base configuration shape.
    """
    environ = os.environ if environ is None else environ
    values = {'separator_chars': environ.get(ENV_SEPARATOR_CHARS, DEFAULT_SEPARATOR_CHARS)}
    if ENV_GROUP_PREFIX in environ:
        values['group_prefix'] = environ[ENV_GROUP_PREFIX]
    if ENV_ITEM_SEPARATOR in environ:
        values['item_separator'] = environ[ENV_ITEM_SEPARATOR]
    return values


# Parser configuration taken from the environment at import time
PARSER_CONFIG = build_parser_config()


def load_client_configuration(values: Optional[Mapping[str, Any]] = None) -> ClientConfiguration:
    """
    Validate a raw configuration record and build the matching configuration.

    Args:
        values: Raw record, defaults to PARSER_CONFIG

    Returns:
        DaClientConfiguration when a group prefix or item separator is given,
        ClientConfiguration otherwise

    Raises:
        ConfigurationError: If the record does not match CONFIGURATION_SCHEMA
    """
    values = dict(PARSER_CONFIG if values is None else values)

    errors = list(Draft7Validator(CONFIGURATION_SCHEMA).iter_errors(values))
    if errors:
        messages = "; ".join(error.message for error in errors)
        raise ConfigurationError(f"Invalid parser configuration: {messages}")

    separator_chars = values.get('separator_chars', DEFAULT_SEPARATOR_CHARS)
    if any(key in values for key in DA_CONFIG_KEYS):
        return DaClientConfiguration(
            separator_chars=separator_chars,
            group_prefix=values.get('group_prefix', ''),
            item_separator=values.get('item_separator', ''),
        )
    return ClientConfiguration(separator_chars=separator_chars)
