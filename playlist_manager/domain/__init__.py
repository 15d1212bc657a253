"""Domain services: accounts, playlists, uploads and search."""

from .accounts import AuthService
from .playlists import PlaylistService
from .search import YouTubeSearchService
from .uploads import UploadHandler

__all__ = ["AuthService", "PlaylistService", "UploadHandler", "YouTubeSearchService"]
