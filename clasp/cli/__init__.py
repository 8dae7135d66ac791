"""Command-line interface for Clasp."""
