"""Command-line interface for cachetop."""
