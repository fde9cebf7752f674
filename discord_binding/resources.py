"""CDN resource URL resolution for avatars and banners."""

from __future__ import annotations


# Hash prefix Discord uses for animated (GIF) resources.
ANIMATED_HASH_PREFIX = "a_"


def resolve_url(
    resource_hash: str | None,
    default_url: str | None,
    static_url: str,
    animated_url: str | None = None,
    size: str | None = "",
) -> str:
    """Select the URL for a user resource and apply the size parameter.

    Args:
        resource_hash: Avatar/banner hash reported by the API (may be None)
        default_url: Fallback image when no hash is set (avatars only)
        static_url: PNG endpoint for the hash
        animated_url: GIF endpoint for the hash, if the resource type has one
        size: Value for the ``size`` query parameter; empty means none

    Returns:
        The selected URL, or an empty string when there is nothing to show.
    """
    if not resource_hash:
        if not default_url:
            return ""
        url = default_url
    elif resource_hash.startswith(ANIMATED_HASH_PREFIX) and animated_url:
        url = animated_url
    else:
        url = static_url

    if size:
        return f"{url}?size={size}"
    return url
