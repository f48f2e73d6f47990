"""Command-line interface for the restarter."""
