"""Tool settings loading."""
