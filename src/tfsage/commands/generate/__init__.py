"""Generate command for module rendering.

Available commands:
    tfsage generate CONFIG    Render the template for a configuration
"""

from .handlers import handle
from .parser import register_parser

__all__ = ["register_parser", "handle"]
