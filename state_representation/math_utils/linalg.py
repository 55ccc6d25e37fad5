################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Linear algebra utilities for rotations and state vectors."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


# Norm below which a vector or quaternion is treated as zero
EPS: float = 1e-12


def assert_finite(x: NDArray[np.float64], name: str) -> None:
    """Raise ValueError when the array contains non-finite values."""
    if not np.all(np.isfinite(x)):
        raise ValueError(f"{name} must be finite")


class Linalg:
    """General linear algebra helpers."""

    @staticmethod
    def ensure_shape(x: NDArray[np.float64], shape: tuple[int, ...], name: str) -> None:
        """Ensure an array has the expected shape."""
        if x.shape != shape:
            raise ValueError(f"{name} must have shape {shape}")

    @staticmethod
    def as_vector(values: Any, size: int, name: str) -> NDArray[np.float64]:
        """Coerce input to a finite float64 vector of the given size."""
        vec: NDArray[np.float64] = np.asarray(values, dtype=float).reshape(-1)
        Linalg.ensure_shape(vec, (size,), name)
        assert_finite(vec, name)
        return vec

    @staticmethod
    def normalized(x: NDArray[np.float64]) -> NDArray[np.float64]:
        """Return x scaled to unit norm, or x unchanged when its norm is zero."""
        vec: NDArray[np.float64] = np.asarray(x, dtype=float)
        norm: float = float(np.linalg.norm(vec))
        if norm < EPS:
            return vec.copy()
        return vec / norm
