"""Image filters, best-fit geometry, user registration logs and an editing session with a command line."""

__version__ = "0.1.0"

__all__ = ["filters", "geometry", "registration", "session", "cli"]