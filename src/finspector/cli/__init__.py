"""Command-line interface for finspector."""
