"""YouTube search proxy.

Searching is a two-stage pipeline against the YouTube Data API v3:

1. ``search`` returns up to ``max_results`` candidate videos for a keyword.
2. ``videos`` returns duration and view count for the collected ids.

The stages are merged by video id in search order. Ids the detail call does
not return get ``duration="N/A"`` and ``views="0"``. Each call is a single
attempt bounded by ``timeout``; any failure surfaces as ``UpstreamFailure``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

import requests

from playlist_manager.errors import BadRequest, UpstreamFailure
from playlist_manager.observability.metrics import record_search

logger = logging.getLogger(__name__)

MISSING_DURATION = "N/A"
MISSING_VIEWS = "0"


@dataclass(frozen=True)
class SearchCandidate:
    video_id: str
    title: str
    thumbnail: Optional[str]


@dataclass(frozen=True)
class VideoDetails:
    duration: str
    views: str


@dataclass(frozen=True)
class SearchResult:
    video_id: str
    title: str
    thumbnail: Optional[str]
    duration: str
    views: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "videoId": self.video_id,
            "title": self.title,
            "thumbnail": self.thumbnail,
            "duration": self.duration,
            "views": self.views,
        }


def _thumbnail_url(snippet: Dict[str, Any]) -> Optional[str]:
    thumbnails = snippet.get("thumbnails") or {}
    for size in ("medium", "high", "default"):
        url = (thumbnails.get(size) or {}).get("url")
        if url:
            return url
    return None


def merge_results(
    candidates: Iterable[SearchCandidate],
    details: Dict[str, VideoDetails],
) -> List[SearchResult]:
    """Join candidates with their details, keeping candidate order."""
    merged: List[SearchResult] = []
    for candidate in candidates:
        detail = details.get(candidate.video_id)
        merged.append(
            SearchResult(
                video_id=candidate.video_id,
                title=candidate.title,
                thumbnail=candidate.thumbnail,
                duration=(detail.duration if detail else None) or MISSING_DURATION,
                views=(detail.views if detail else None) or MISSING_VIEWS,
            )
        )
    return merged


class YouTubeSearchService:
    def __init__(
        self,
        api_key: Optional[str],
        api_base: str = "https://www.googleapis.com/youtube/v3",
        timeout: float = 10.0,
        max_results: int = 10,
        http: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.max_results = max_results
        self.http = http or requests.Session()

    def _get_json(self, endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.api_base}/{endpoint}"
        try:
            response = self.http.get(url, params={**params, "key": self.api_key}, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as exc:
            logger.warning("YouTube %s request timed out after %ss", endpoint, self.timeout)
            raise UpstreamFailure() from exc
        except (requests.exceptions.RequestException, ValueError) as exc:
            logger.warning("YouTube %s request failed: %s", endpoint, exc)
            raise UpstreamFailure() from exc
        if not isinstance(data, dict):
            raise UpstreamFailure()
        return data

    def fetch_candidates(self, query: str) -> List[SearchCandidate]:
        data = self._get_json(
            "search",
            {"part": "snippet", "type": "video", "maxResults": self.max_results, "q": query},
        )
        candidates: List[SearchCandidate] = []
        for entry in data.get("items") or []:
            video_id = (entry.get("id") or {}).get("videoId")
            if not video_id:
                continue
            snippet = entry.get("snippet") or {}
            candidates.append(
                SearchCandidate(
                    video_id=video_id,
                    title=snippet.get("title") or "",
                    thumbnail=_thumbnail_url(snippet),
                )
            )
        return candidates

    def fetch_details(self, video_ids: List[str]) -> Dict[str, VideoDetails]:
        data = self._get_json(
            "videos",
            {"part": "contentDetails,statistics", "id": ",".join(video_ids)},
        )
        details: Dict[str, VideoDetails] = {}
        for entry in data.get("items") or []:
            video_id = entry.get("id")
            if not video_id:
                continue
            details[video_id] = VideoDetails(
                duration=(entry.get("contentDetails") or {}).get("duration") or MISSING_DURATION,
                views=str((entry.get("statistics") or {}).get("viewCount") or MISSING_VIEWS),
            )
        return details

    def search(self, query: Optional[str]) -> List[SearchResult]:
        query = (query or "").strip()
        if not query:
            record_search("invalid")
            raise BadRequest("Missing query parameter")
        if not self.api_key:
            record_search("error")
            logger.error("YOUTUBE_API_KEY is not configured; search unavailable")
            raise UpstreamFailure()

        try:
            candidates = self.fetch_candidates(query)
            if not candidates:
                record_search("empty")
                return []
            details = self.fetch_details([c.video_id for c in candidates])
        except UpstreamFailure:
            record_search("error")
            raise

        record_search("success")
        return merge_results(candidates, details)


__all__ = [
    "SearchCandidate",
    "VideoDetails",
    "SearchResult",
    "YouTubeSearchService",
    "merge_results",
]
