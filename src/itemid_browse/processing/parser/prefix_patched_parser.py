"""Separator parser patched with a group prefix / item separator heuristic."""
import logging
from typing import Any, Optional

from itemid_browse.domain.models import (
    ClientConfiguration,
    DaClientConfiguration,
    FailureReason,
    ParseResult,
)
from itemid_browse.processing.parser.base_parser import ItemIdParser
from itemid_browse.processing.parser.separator_parser import SeparatorParser
from itemid_browse.processing.shared.error_handling import ConfigurationTypeError


class PrefixPatchedParser(ItemIdParser):
    """
    Falls back to a group/single item heuristic when the separator
    characters give no browse name.

    This is a patch rather than a general solution. Item ids are assumed
    to be either groups or single items:
      - group ids start with the group prefix and only get a name through
        the item separator;
      - single item ids do not start with the group prefix and always get
        a name, the text after the last item separator or the whole id.
    Without an explicit group prefix the heuristic does not apply.

    Requires a DaClientConfiguration (or None); any other configuration
    type raises ConfigurationTypeError.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        base_parser: Optional[ItemIdParser] = None
    ):
        super().__init__(logger)
        self.base_parser = base_parser or SeparatorParser(self.logger)

    def parse(
        self,
        configuration: Optional[ClientConfiguration],
        item_id: Optional[str],
        server: Any = None
    ) -> ParseResult:
        self._require_da_configuration(configuration)

        result = self.base_parser.parse(configuration, item_id, server)
        if result:
            return result

        if configuration is None or item_id is None:
            return self._fail(item_id, FailureReason.INAPPLICABLE_CONFIGURATION)

        group_prefix = configuration.group_prefix
        item_separator = configuration.item_separator

        if not group_prefix:
            return self._fail(item_id, FailureReason.INAPPLICABLE_CONFIGURATION)

        if item_id.startswith(group_prefix):
            # Group ids never fall back to the whole id.
            if not item_separator:
                return self._fail(item_id, FailureReason.INAPPLICABLE_CONFIGURATION)
            index = item_id.rfind(item_separator)
            if index < 0:
                return self._fail(item_id, FailureReason.NO_MATCH)
            # Skip the whole separator, not one character, so "::" never leaks a ":".
            return ParseResult.found(item_id[index + len(item_separator):])

        if not item_separator:
            return ParseResult.found(item_id)

        index = item_id.rfind(item_separator)
        if index < 0:
            return ParseResult.found(item_id)
        # Same whole-separator skip as the group case.
        return ParseResult.found(item_id[index + len(item_separator):])

    def _require_da_configuration(self, configuration: Optional[ClientConfiguration]) -> None:
        """Raise ConfigurationTypeError unless configuration is None or a DaClientConfiguration."""
        if configuration is None or isinstance(configuration, DaClientConfiguration):
            return
        error = ConfigurationTypeError(type(self).__name__, DaClientConfiguration, configuration)
        self.logger.error(str(error))
        raise error
