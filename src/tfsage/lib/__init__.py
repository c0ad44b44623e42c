"""Shared building blocks used by tfsage commands."""
