from __future__ import annotations

"""Average solve time over a session's timing samples."""

from typing import Optional, Sequence


def calculate_average_time(times: Sequence[float], size: Optional[int] = None) -> float:
    """Return the mean of the first ``size`` values of ``times``.

    - size defaults to len(times) and is clamped to it.
    - size <= 0 yields 0.0.
    - Any negative value yields 0.0 for the whole average, not a partial mean.
    """
    n = len(times) if size is None else min(int(size), len(times))
    if n <= 0:
        return 0.0

    total = 0.0
    for t in times[:n]:
        if t < 0:
            return 0.0
        total += float(t)
    return total / n
