"""tfsage: render per-environment Terraform modules and run Terraform against them."""

__version__ = "0.1.0"
