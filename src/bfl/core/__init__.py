"""Core infrastructure: configuration, logging and error types."""
