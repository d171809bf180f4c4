"""Command line interface for entity-naming."""
