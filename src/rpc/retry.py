"""Pure functions for RPC retry delays with capped exponential backoff."""

import math


DEFAULT_BASE_MS = 250
DEFAULT_MAX_MS = 5000


# === Functional Core ===

def _normalize_attempt(attempt):
    """Coerce attempt to a non-negative number, treating junk as 0."""
    try:
        value = float(attempt)
    except OverflowError:
        # int too large for a float
        value = math.inf if attempt > 0 else 0.0
    except (TypeError, ValueError):
        return 0.0

    if math.isnan(value):
        return 0.0
    return max(0.0, value)


def compute_retry_delay_ms(attempt, base_ms=DEFAULT_BASE_MS, max_ms=DEFAULT_MAX_MS):
    """
    Compute delay before the next RPC retry as min(base_ms * 2^attempt, max_ms).

    Args:
        attempt: Zero-based retry count. Negative, NaN or non-numeric values
            are treated as 0
        base_ms: Delay for attempt 0 in milliseconds
        max_ms: Maximum delay cap in milliseconds

    Returns:
        Delay in whole milliseconds: [250, 500, 1000, 2000, 4000, 5000, 5000, ...]
        for default parameters
    """
    safe_attempt = _normalize_attempt(attempt)

    try:
        delay = base_ms * 2.0 ** safe_attempt
    except OverflowError:
        delay = math.inf

    if not math.isfinite(delay) or delay > max_ms:
        return math.floor(max_ms)

    return math.floor(delay)
