"""Local-network file sharing: HTTP transfer server, hotspot credentials, transfer history and SVG icons."""

__version__ = "0.7.9"

__all__ = [
    "credentials",
    "database",
    "handlers",
    "icons",
    "logos",
    "navigation",
    "platform",
    "server",
]