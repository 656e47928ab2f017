"""Command-line interface for casktoken."""
