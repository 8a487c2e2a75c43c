from .base_parser import ItemIdParser
from .separator_parser import SeparatorParser
from .prefix_patched_parser import PrefixPatchedParser
from .factory import create_item_id_parser

__all__ = ["ItemIdParser", "SeparatorParser", "PrefixPatchedParser", "create_item_id_parser"]
