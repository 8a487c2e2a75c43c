"""Derive browse names from hierarchical item ids."""
from itemid_browse.config.settings import load_client_configuration
from itemid_browse.domain.models import (
    ClientConfiguration,
    DaClientConfiguration,
    FailureReason,
    ParseResult,
)
from itemid_browse.processing.parser import (
    ItemIdParser,
    PrefixPatchedParser,
    SeparatorParser,
    create_item_id_parser,
)
from itemid_browse.processing.shared.error_handling import (
    ConfigurationError,
    ConfigurationTypeError,
    ItemIdParserError,
)

__all__ = [
    "ClientConfiguration",
    "DaClientConfiguration",
    "FailureReason",
    "ParseResult",
    "ItemIdParser",
    "SeparatorParser",
    "PrefixPatchedParser",
    "create_item_id_parser",
    "load_client_configuration",
    "ItemIdParserError",
    "ConfigurationError",
    "ConfigurationTypeError",
]
