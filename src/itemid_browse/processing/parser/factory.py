"""Factory for picking an item id parser based on the active configuration shape."""

import logging
from typing import Optional

from itemid_browse.domain.models import ClientConfiguration, DaClientConfiguration
from .base_parser import ItemIdParser
from .prefix_patched_parser import PrefixPatchedParser
from .separator_parser import SeparatorParser


def create_item_id_parser(
    configuration: Optional[ClientConfiguration] = None,
    logger: Optional[logging.Logger] = None
) -> ItemIdParser:
    """
    Create the parser matching a configuration.

    Args:
        configuration: Active wrapper configuration (None selects the default parser)
        logger: Optional logger handed to the parser

    Returns:
        PrefixPatchedParser for a DaClientConfiguration, SeparatorParser otherwise
    """
    if isinstance(configuration, DaClientConfiguration):
        return PrefixPatchedParser(logger)
    return SeparatorParser(logger)
