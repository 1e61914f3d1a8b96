"""A small routing HTTP server with a rotating request log and shared configuration."""

__version__ = "0.1.0"