"""Command-line interface for pigsfly."""
