"""Core infrastructure: configuration, DI container and exceptions."""
