"""Command-line helpers run from the project root."""
