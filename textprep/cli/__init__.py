"""Command-line interface for textprep."""
