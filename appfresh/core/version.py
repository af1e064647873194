"""Dot-separated numeric version comparison."""


def _components(version: str) -> list[int]:
    # Non-numeric components are dropped, not treated as zero
    parts = []
    for chunk in version.split('.'):
        if chunk.isascii() and chunk.isdigit():
            parts.append(int(chunk))
    return parts


def is_older(current: str, latest: str) -> bool:
    """Return True if ``current`` is strictly older than ``latest``.

    Components are compared pairwise up to the shorter sequence. When that
    common prefix is equal, the shorter sequence is the older one, so
    ``"1.2"`` is older than ``"1.2.0"``.
    """
    current_parts = _components(current)
    latest_parts = _components(latest)

    for cur, lat in zip(current_parts, latest_parts):
        if cur < lat:
            return True
        if cur > lat:
            return False

    return len(current_parts) < len(latest_parts)
