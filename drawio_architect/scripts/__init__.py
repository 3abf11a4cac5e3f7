"""Command line utilities."""
