"""MP3 upload validation and storage."""

from __future__ import annotations

import logging
import os
import re
import time
from typing import Callable, Dict, Optional

from werkzeug.datastructures import FileStorage, MultiDict

from playlist_manager.errors import BadRequest, UploadRejected
from playlist_manager.observability.metrics import record_upload
from playlist_manager.utils.ids import epoch_millis

logger = logging.getLogger(__name__)

ACCEPTED_MIMETYPE = "audio/mpeg"
ACCEPTED_EXTENSION = ".mp3"
UPLOAD_FIELD = "mp3"

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9._-]")


def sanitize_filename(name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9._-]`` with an underscore."""
    return _UNSAFE_CHARS.sub("_", name)


def is_accepted_audio(filename: str, mimetype: Optional[str]) -> bool:
    # Either signal is enough; content is not inspected
    return (mimetype or "").lower() == ACCEPTED_MIMETYPE or filename.lower().endswith(ACCEPTED_EXTENSION)


class UploadHandler:
    def __init__(
        self,
        uploads_dir: str,
        url_prefix: str = "/uploads",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.uploads_dir = os.path.abspath(uploads_dir)
        self.url_prefix = url_prefix.rstrip("/")
        self._clock = clock

    def ensure_directory(self) -> None:
        os.makedirs(self.uploads_dir, exist_ok=True)

    def _stored_name(self, original_name: str) -> str:
        safe_name = sanitize_filename(original_name)
        millis = epoch_millis(self._clock)
        stored = f"{millis}-{safe_name}"
        while os.path.exists(os.path.join(self.uploads_dir, stored)):
            millis += 1
            stored = f"{millis}-{safe_name}"
        return stored

    def select(self, files: MultiDict) -> Optional[FileStorage]:
        """Pick the single ``mp3`` part out of a multipart request's files."""
        unexpected = sorted(key for key in files.keys() if key != UPLOAD_FIELD)
        if unexpected:
            record_upload("rejected")
            logger.warning("Rejected upload with unexpected file fields %s", unexpected)
            raise BadRequest("Unexpected file field")

        parts = files.getlist(UPLOAD_FIELD)
        if len(parts) > 1:
            record_upload("rejected")
            logger.warning("Rejected upload with %d %s parts", len(parts), UPLOAD_FIELD)
            raise BadRequest("Only one file allowed")
        return parts[0] if parts else None

    def save(self, upload: Optional[FileStorage]) -> Dict[str, str]:
        """Persist one uploaded MP3 and return its public URL and original name."""
        if upload is None or not upload.filename:
            record_upload("missing")
            raise BadRequest("No file uploaded")

        original_name = upload.filename
        if not is_accepted_audio(original_name, upload.mimetype):
            record_upload("rejected")
            logger.warning("Rejected upload %r (%s)", original_name, upload.mimetype)
            raise UploadRejected("Only MP3 files allowed")

        self.ensure_directory()
        stored = self._stored_name(original_name)
        upload.save(os.path.join(self.uploads_dir, stored))

        record_upload("accepted")
        logger.info("Stored upload %r as %s", original_name, stored)
        return {
            "fileUrl": f"{self.url_prefix}/{stored}",
            "originalName": original_name,
        }


__all__ = ["UploadHandler", "UPLOAD_FIELD", "sanitize_filename", "is_accepted_audio"]
