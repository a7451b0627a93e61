"""Click commands for the legalchunk CLI."""
