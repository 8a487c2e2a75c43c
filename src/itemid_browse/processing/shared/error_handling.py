"""
Exceptions raised by the item id parsers and the configuration loader.

Expected parse failures are never raised; they come back as a failed
ParseResult. Only misuse of the parser contract surfaces here.
"""


class ItemIdParserError(Exception):
    """Base exception for item id parser errors."""
    pass


class ConfigurationError(ItemIdParserError, ValueError):
    """Exception raised when a configuration record fails validation."""
    pass


class ConfigurationTypeError(ItemIdParserError, TypeError):
    """Exception raised when a parser is handed a configuration of the wrong shape."""

    def __init__(self, parser_name: str, expected: type, actual: object):
        self.parser_name = parser_name
        self.expected = expected
        self.actual_type = type(actual)
        super().__init__(
            f"{parser_name} requires a {expected.__name__}, "
            f"got {self.actual_type.__name__}"
        )
