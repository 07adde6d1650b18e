from .base import DocumentParser
from .models import Category, RoastCollection
from .roast_parser import RoastParser, parse_roasts
from .rules import ScanRules, load_rules

__all__ = [
    "Category",
    "DocumentParser",
    "RoastCollection",
    "RoastParser",
    "ScanRules",
    "load_rules",
    "parse_roasts",
]
