"""
Images module.

Public storage URLs and artwork image uploads.

Public API:
- format_storage_url: Canonical public URL for any stored path
- build_object_path: Object key for a new upload
- collapse_duplicate_bucket: Drop a doubled bucket prefix

ImageStorage lives in modules.images.service.
"""

from .urls import (
    DEFAULT_BUCKET,
    KNOWN_BUCKETS,
    PUBLIC_PREFIX,
    build_object_path,
    collapse_duplicate_bucket,
    format_storage_url,
)

__all__ = [
    "DEFAULT_BUCKET",
    "KNOWN_BUCKETS",
    "PUBLIC_PREFIX",
    "build_object_path",
    "collapse_duplicate_bucket",
    "format_storage_url",
]
