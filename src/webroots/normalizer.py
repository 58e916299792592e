# src/webroots/normalizer.py
"""URL canonicalization applied before any base URL comparison."""

from __future__ import annotations

_FRONT_CONTROLLER = "/index.php/"


def normalize_url(url: str) -> str:
    """Rewrite superficially different URL forms into one comparable form.

    Rules, in order:
    - every ``/index.php/`` segment collapses to ``/``
    - ``https://`` is folded to ``http://``
    - a protocol-relative ``//host/...`` becomes ``http://host/...``

    No percent-decoding and no trailing-slash handling.

    Examples:
        >>> normalize_url("https://shop.test/index.php/media/a.png")
        'http://shop.test/media/a.png'
        >>> normalize_url("//cdn.test/a.png")
        'http://cdn.test/a.png'
    """
    # Repeat so "/index.php/index.php/" cannot leave a fresh segment behind
    while _FRONT_CONTROLLER in url:
        url = url.replace(_FRONT_CONTROLLER, "/")
    url = url.replace("https://", "http://")
    if url.startswith("//"):
        url = "http://" + url[2:]
    return url
