################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Time unit helpers."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Union


Duration = Union[float, int, timedelta]


def to_seconds(dt: Duration) -> float:
    """Return a duration in seconds, accepting timedelta or numeric seconds."""
    if isinstance(dt, timedelta):
        return dt.total_seconds()
    seconds: float = float(dt)
    if not math.isfinite(seconds):
        raise ValueError("time delta must be finite")
    return seconds


def to_nonzero_seconds(dt: Duration) -> float:
    """Return a duration in seconds, rejecting a zero period."""
    seconds: float = to_seconds(dt)
    if seconds == 0.0:
        raise ZeroDivisionError("time delta must be non-zero")
    return seconds
