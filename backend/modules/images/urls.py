"""
Storage URL helpers.

Image paths reach the API in several shapes: bare object keys
("123/photo.png"), bucket-prefixed keys, keys with the bucket name
accidentally doubled ("artwork-images/artwork-images/photo.png"), or full
public URLs. format_storage_url() turns all of them into one canonical
public URL and is idempotent.
"""

import secrets
import time
from string import ascii_lowercase, digits
from typing import Iterable, Optional

PUBLIC_PREFIX = "storage/v1/object/public/"
DEFAULT_BUCKET = "artwork-images"
KNOWN_BUCKETS = ("artwork-images", "avatars", "profiles")

_BASE36 = digits + ascii_lowercase


def collapse_duplicate_bucket(path: str, buckets: Iterable[str] = KNOWN_BUCKETS) -> str:
    """Drop a repeated bucket prefix: "avatars/avatars/x.png" -> "avatars/x.png"."""
    parts = path.split("/")
    while len(parts) > 1 and parts[0] in buckets and parts[1] == parts[0]:
        del parts[1]
    return "/".join(parts)


def format_storage_url(
    path: Optional[str],
    base_url: str,
    buckets: Iterable[str] = KNOWN_BUCKETS,
    default_bucket: str = DEFAULT_BUCKET,
) -> str:
    """
    Build the public URL for a storage object.

    Args:
        path: Object key, bucket-prefixed key, public path or full URL
        base_url: Supabase project URL
        buckets: Bucket names recognised as a path prefix
        default_bucket: Bucket used when the path names none

    Returns:
        "{base_url}/storage/v1/object/public/{bucket}/{key}", the input
        unchanged if it already is an absolute URL, or "" for empty input
    """
    buckets = tuple(buckets)
    if not path:
        return ""

    if path.startswith(("https://", "http://")):
        return path

    clean = path.lstrip("/")
    if PUBLIC_PREFIX in clean:
        clean = clean.split(PUBLIC_PREFIX, 1)[1]

    clean = collapse_duplicate_bucket(clean, buckets)

    if not any(clean.startswith(f"{bucket}/") for bucket in buckets):
        clean = f"{default_bucket}/{clean}"

    return f"{base_url.rstrip('/')}/{PUBLIC_PREFIX}{clean}"


def build_object_path(
    artwork_id: str,
    filename: str,
    timestamp_ms: Optional[int] = None,
    token: Optional[str] = None,
) -> str:
    """
    Object key for a new upload: "{artwork_id}/{ms}-{random6}.{ext}".

    The random suffix keeps two uploads in the same millisecond apart.
    """
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else "bin"
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    if token is None:
        token = "".join(secrets.choice(_BASE36) for _ in range(6))
    return f"{artwork_id}/{timestamp_ms}-{token}.{ext}"
