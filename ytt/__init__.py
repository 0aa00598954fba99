"""Terminal browser for YouTube playlists with themable list views."""

__version__ = "0.1.0"