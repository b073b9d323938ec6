"""Shared utilities: logging and the pure-Python event system."""
