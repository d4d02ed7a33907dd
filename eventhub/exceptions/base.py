"""Base exception for the EventHub admin application."""


class AppException(Exception):
    """Root of every domain-level error raised by the application."""
