# processing/parser/base_parser.py
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional, Tuple
import logging

from itemid_browse.domain.models import ClientConfiguration, FailureReason, ParseResult
from itemid_browse.processing.shared.constants import FAILURE_REASONS


class ItemIdParser(ABC):
    """Abstract base class for item id parsers implementing parse."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize parser with optional logger."""
        self.logger = logger or logging.getLogger(__name__)

    @abstractmethod
    def parse(
        self,
        configuration: Optional[ClientConfiguration],
        item_id: Optional[str],
        server: Any = None
    ) -> ParseResult:
        """
        Derive the browse name for a single item id.

        Args:
            configuration: Wrapper configuration owned by the bridge
            item_id: Item id to parse
            server: Bridge object that provided the item id, if any

        Returns:
            ParseResult; on failure browse_name is None
        """
        raise NotImplementedError

    def parse_many(
        self,
        configuration: Optional[ClientConfiguration],
        item_ids: Iterable[Optional[str]],
        server: Any = None
    ) -> Iterator[Tuple[Optional[str], ParseResult]]:
        """
        Parse several item ids against the same configuration.

        Args:
            configuration: Wrapper configuration owned by the bridge
            item_ids: Item ids to parse, in order
            server: Bridge object that provided the item ids, if any

        Returns:
            Iterator of (item_id, ParseResult) pairs in input order
        """
        for item_id in item_ids:
            yield item_id, self.parse(configuration, item_id, server)

    def _fail(self, item_id: Optional[str], reason: FailureReason) -> ParseResult:
        self.logger.debug(
            f"{type(self).__name__}: no browse name for {item_id!r} "
            f"({FAILURE_REASONS[reason.value]})"
        )
        return ParseResult.failed(reason)
