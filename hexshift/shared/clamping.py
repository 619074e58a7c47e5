def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp_channel(v: float) -> int:
    """Round a 0-255 float to the nearest integer channel value."""
    if v != v:
        return 0
    return max(0, min(255, int(v + 0.5)))
