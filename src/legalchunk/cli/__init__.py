"""Command-line interface for legalchunk."""
