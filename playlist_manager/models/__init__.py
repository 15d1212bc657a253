from .records import MAX_RATING, MIN_RATING, Playlist, PlaylistItem, PublicUser, User, coerce_rating

__all__ = ["Playlist", "PlaylistItem", "PublicUser", "User", "coerce_rating", "MIN_RATING", "MAX_RATING"]
