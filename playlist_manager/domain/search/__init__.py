from .youtube import SearchCandidate, SearchResult, VideoDetails, YouTubeSearchService

__all__ = ["SearchCandidate", "SearchResult", "VideoDetails", "YouTubeSearchService"]
