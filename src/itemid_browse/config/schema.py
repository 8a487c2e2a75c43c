"""JSON Schema for wrapper configuration records."""

CONFIGURATION_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "ItemIdParserConfiguration",
    "type": "object",
    "properties": {
        # Either "./" or [".", "/"]; order is the matching priority
        "separator_chars": {
            "oneOf": [
                {"type": "string"},
                {
                    "type": "array",
                    "items": {"type": "string", "minLength": 1, "maxLength": 1},
                },
            ]
        },
        "group_prefix": {"type": "string"},
        "item_separator": {"type": "string"},
    },
    "additionalProperties": False,
}
