"""Inventory and rank package-manager cache directories by disk usage."""

__version__ = "0.3.0"
