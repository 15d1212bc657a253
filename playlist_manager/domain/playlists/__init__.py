from .service import PlaylistService

__all__ = ["PlaylistService"]
