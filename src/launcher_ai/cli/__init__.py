"""Command line interface for the launcher AI module."""
