from __future__ import annotations

import math


def percentage(part: int, total: int) -> int:
    """Whole-number percentage rounded half up; 0 when ``total`` is 0."""
    if not total:
        return 0
    return int(math.floor(part * 100 / total + 0.5))
