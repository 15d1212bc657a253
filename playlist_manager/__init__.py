"""Playlist manager backend: accounts, playlists, MP3 uploads and YouTube search."""

__version__ = "1.0.0"
