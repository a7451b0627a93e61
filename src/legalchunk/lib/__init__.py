"""Core chunking library and supporting utilities."""
