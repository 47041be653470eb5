"""Command-line interface for entityfield."""
