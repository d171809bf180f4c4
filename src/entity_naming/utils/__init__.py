"""Settings loading, logging and import helpers."""
