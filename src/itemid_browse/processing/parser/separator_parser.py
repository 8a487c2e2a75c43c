"""Default item id parser driven by the configured separator characters."""
from typing import Any, Optional

from itemid_browse.domain.models import ClientConfiguration, FailureReason, ParseResult
from itemid_browse.processing.parser.base_parser import ItemIdParser


class SeparatorParser(ItemIdParser):
    """
    Takes the text after the last occurrence of the first separator
    character, in configured order, that appears in the item id.

    Configured order is the priority: with separators ",." the id
    "a,b.c" yields "b.c", because ',' is tried before '.'.
    """

    def parse(
        self,
        configuration: Optional[ClientConfiguration],
        item_id: Optional[str],
        server: Any = None
    ) -> ParseResult:
        if configuration is None or item_id is None:
            return self._fail(item_id, FailureReason.INAPPLICABLE_CONFIGURATION)

        if not configuration.separator_chars:
            return self._fail(item_id, FailureReason.INAPPLICABLE_CONFIGURATION)

        for separator in configuration.separator_chars:
            index = item_id.rfind(separator)
            if index >= 0:
                return ParseResult.found(item_id[index + 1:])

        return self._fail(item_id, FailureReason.NO_MATCH)
