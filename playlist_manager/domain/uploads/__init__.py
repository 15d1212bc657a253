from .handler import UploadHandler, sanitize_filename

__all__ = ["UploadHandler", "sanitize_filename"]
