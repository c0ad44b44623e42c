"""Terraform commands run against a rendered module.

Available commands:
    tfsage init CONFIG       Initialize Terraform
    tfsage plan CONFIG       Plan infrastructure changes
    tfsage apply CONFIG      Apply infrastructure changes
    tfsage destroy CONFIG    Destroy infrastructure
    tfsage output CONFIG     Show Terraform outputs
"""

from .handlers import handle
from .parser import TERRAFORM_COMMANDS, register_parser

__all__ = ["TERRAFORM_COMMANDS", "register_parser", "handle"]
