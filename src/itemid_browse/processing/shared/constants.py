"""
Shared constants for the item id parsers and their configuration.
Only for values used across multiple components.
"""

# Environment variables read by config.settings
ENV_SEPARATOR_CHARS = 'ITEMID_SEPARATOR_CHARS'
ENV_GROUP_PREFIX = 'ITEMID_GROUP_PREFIX'
ENV_ITEM_SEPARATOR = 'ITEMID_ITEM_SEPARATOR'
ENV_LOG_DIR = 'ITEMID_LOG_DIR'
ENV_LOG_LEVEL = 'ITEMID_LOG_LEVEL'

# Keys that mark the data access configuration shape
DA_CONFIG_KEYS = ('group_prefix', 'item_separator')

DEFAULT_SEPARATOR_CHARS = ''
DEFAULT_LOG_LEVEL = 'INFO'

# Human readable descriptions of FailureReason values, used in log lines
FAILURE_REASONS = {
    'inapplicable_configuration': 'configuration or item id absent, or required separators empty',
    'no_match': 'no configured separator or prefix present in item id',
}
