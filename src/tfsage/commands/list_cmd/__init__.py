"""List command for configuration discovery.

Available commands:
    tfsage list    Show configurations found under configs/
"""

from .handlers import handle
from .parser import register_parser

__all__ = ["register_parser", "handle"]
