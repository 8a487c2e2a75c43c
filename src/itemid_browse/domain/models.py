"""Configuration records and parse results shared by the item id parsers."""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence, Union


class FailureReason(Enum):
    """Why a browse name could not be derived."""
    INAPPLICABLE_CONFIGURATION = "inapplicable_configuration"
    NO_MATCH = "no_match"


def _join_separators(separator_chars: Union[str, Sequence[str], None]) -> str:
    if separator_chars is None:
        return ""
    if isinstance(separator_chars, str):
        return separator_chars
    separators = list(separator_chars)
    invalid = [s for s in separators if not isinstance(s, str) or len(s) != 1]
    if invalid:
        raise ValueError(f"Separator entries must be single characters, got {invalid!r}")
    return "".join(separators)


@dataclass(frozen=True)
class ClientConfiguration:
    """
    Base wrapper configuration as owned by the bridge.

    Args:
        separator_chars: Ordered separator characters; list order is the
            matching priority. A list of single characters is joined.
    """
    separator_chars: str = ""

    def __post_init__(self):
        object.__setattr__(self, "separator_chars", _join_separators(self.separator_chars))


@dataclass(frozen=True)
class DaClientConfiguration(ClientConfiguration):
    """Data access configuration: adds the group prefix and item separator."""
    group_prefix: str = ""
    item_separator: str = ""

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "group_prefix", self.group_prefix or "")
        object.__setattr__(self, "item_separator", self.item_separator or "")


@dataclass(frozen=True)
class ParseResult:
    success: bool
    browse_name: Optional[str] = None
    reason: Optional[FailureReason] = None

    @classmethod
    def found(cls, browse_name: str) -> "ParseResult":
        return cls(True, browse_name)

    @classmethod
    def failed(cls, reason: FailureReason) -> "ParseResult":
        return cls(False, None, reason)

    def __bool__(self) -> bool:
        return self.success

    def __iter__(self) -> Iterator:
        # Unpacks as (success, browse_name).
        yield self.success
        yield self.browse_name
