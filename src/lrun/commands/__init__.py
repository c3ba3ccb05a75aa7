"""Command modules for lrun CLI."""
