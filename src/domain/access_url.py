def build_access_url(frontend_base_url: str, event_slug: str, token: str) -> str:
    """
    Build the public deep link for an access token.

    Example:
        build_access_url("https://app.example.com/", "gala-2025", "V1StGXR8_Z5jdHi6B-myT")
        -> "https://app.example.com/events/gala-2025?token=V1StGXR8_Z5jdHi6B-myT"
    """
    base = frontend_base_url.rstrip("/")
    return f"{base}/events/{event_slug}?token={token}"
