################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Quaternion utilities using the wxyz convention."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .linalg import EPS
from .linalg import Linalg
from .linalg import assert_finite
from .rng import get_generator


# Vector-part norm below which log/exp treat a quaternion as the identity
LOG_EPS: float = 1e-4


@dataclass(frozen=True)
class Quaternion:
    """Quaternion stored in wxyz order."""

    wxyz: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Validate quaternion inputs."""
        wxyz: NDArray[np.float64] = np.asarray(self.wxyz, dtype=float)
        if wxyz.shape != (4,):
            raise ValueError("wxyz must be shape (4,)")
        assert_finite(wxyz, "wxyz")
        object.__setattr__(self, "wxyz", wxyz)

    @staticmethod
    def identity() -> "Quaternion":
        """Return the identity quaternion."""
        return Quaternion.from_wxyz(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_wxyz(w: float, x: float, y: float, z: float) -> "Quaternion":
        """Create a quaternion from components."""
        return Quaternion(np.array([w, x, y, z], dtype=float))

    @staticmethod
    def from_axis_angle(axis: NDArray[np.float64], angle: float) -> "Quaternion":
        """Create a unit quaternion rotating by angle about axis."""
        vec: NDArray[np.float64] = Linalg.as_vector(axis, 3, "axis")
        norm: float = float(np.linalg.norm(vec))
        if norm < EPS:
            raise ValueError("axis must be non-zero")
        half: float = 0.5 * angle
        xyz: NDArray[np.float64] = math.sin(half) * vec / norm
        return Quaternion(np.concatenate(([math.cos(half)], xyz)))

    @staticmethod
    def random() -> "Quaternion":
        """Draw a unit quaternion uniformly distributed over SO(3)."""
        u1: float
        u2: float
        u3: float
        u1, u2, u3 = get_generator().uniform(0.0, 1.0, size=3)
        a: float = math.sqrt(1.0 - u1)
        b: float = math.sqrt(u1)
        return Quaternion.from_wxyz(
            a * math.sin(2.0 * math.pi * u2),
            a * math.cos(2.0 * math.pi * u2),
            b * math.sin(2.0 * math.pi * u3),
            b * math.cos(2.0 * math.pi * u3),
        )

    @property
    def w(self) -> float:
        """Scalar part."""
        return float(self.wxyz[0])

    @property
    def vec(self) -> NDArray[np.float64]:
        """Vector part as a copy."""
        return np.array(self.wxyz[1:], dtype=float)

    def norm(self) -> float:
        """Return the Euclidean norm of the four components."""
        return float(np.linalg.norm(self.wxyz))

    def normalized(self) -> "Quaternion":
        """Return a normalized quaternion."""
        norm: float = self.norm()
        if norm < EPS:
            raise ValueError("Quaternion norm is too small")
        return Quaternion(self.wxyz / norm)

    def conjugate(self) -> "Quaternion":
        """Return the conjugate quaternion."""
        q: NDArray[np.float64] = self.wxyz
        return Quaternion.from_wxyz(
            float(q[0]), float(-q[1]), float(-q[2]), float(-q[3])
        )

    def inverse(self) -> "Quaternion":
        """Return the inverse quaternion."""
        return self.normalized().conjugate()

    def negated(self) -> "Quaternion":
        """Return -q, which encodes the same rotation."""
        return Quaternion(-self.wxyz)

    def dot(self, other: "Quaternion") -> float:
        """Return the 4D inner product of the coefficients."""
        return float(np.dot(self.wxyz, other.wxyz))

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        """Multiply two quaternions using the Hamilton product."""
        q1: NDArray[np.float64] = self.wxyz
        q2: NDArray[np.float64] = other.wxyz
        w1: float = float(q1[0])
        x1: float = float(q1[1])
        y1: float = float(q1[2])
        z1: float = float(q1[3])
        w2: float = float(q2[0])
        x2: float = float(q2[1])
        y2: float = float(q2[2])
        z2: float = float(q2[3])
        w: float = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
        x: float = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
        y: float = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
        z: float = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2
        return Quaternion.from_wxyz(w, x, y, z)

    def log(self) -> "Quaternion":
        """Return the logarithm of a unit quaternion.

        The result has a zero scalar part and a vector part equal to the unit
        rotation axis scaled by half the rotation angle. Quaternions whose
        vector part is shorter than LOG_EPS map to zero.
        """
        vec: NDArray[np.float64] = self.vec
        vec_norm: float = float(np.linalg.norm(vec))
        if vec_norm <= LOG_EPS:
            return Quaternion(np.zeros(4, dtype=float))
        half_angle: float = math.acos(min(max(self.w, -1.0), 1.0))
        return Quaternion(np.concatenate(([0.0], vec / vec_norm * half_angle)))

    def exp(self, scale: float = 1.0) -> "Quaternion":
        """Return exp(scale * q) for a pure quaternion q, as a unit quaternion."""
        vec: NDArray[np.float64] = self.vec
        vec_norm: float = float(np.linalg.norm(vec))
        if vec_norm <= LOG_EPS:
            return Quaternion.identity()
        angle: float = scale * vec_norm
        return Quaternion(
            np.concatenate(([math.cos(angle)], math.sin(angle) * vec / vec_norm))
        )

    def as_matrix(self) -> NDArray[np.float64]:
        """Return the rotation matrix representation."""
        q: NDArray[np.float64] = self.normalized().wxyz
        w: float = float(q[0])
        x: float = float(q[1])
        y: float = float(q[2])
        z: float = float(q[3])
        return np.array(
            [
                [
                    1.0 - 2.0 * (y * y + z * z),
                    2.0 * (x * y - z * w),
                    2.0 * (x * z + y * w),
                ],
                [
                    2.0 * (x * y + z * w),
                    1.0 - 2.0 * (x * x + z * z),
                    2.0 * (y * z - x * w),
                ],
                [
                    2.0 * (x * z - y * w),
                    2.0 * (y * z + x * w),
                    1.0 - 2.0 * (x * x + y * y),
                ],
            ],
            dtype=float,
        )

    def rotate(self, v: NDArray[np.float64]) -> NDArray[np.float64]:
        """Rotate a 3-vector by this quaternion."""
        vec: NDArray[np.float64] = Linalg.as_vector(v, 3, "v")
        return self.as_matrix() @ vec

    def to_wxyz(self) -> NDArray[np.float64]:
        """Return a copy of the quaternion components."""
        return np.array(self.wxyz, dtype=float)

    def angular_distance(self, other: "Quaternion") -> float:
        """Return the rotation angle separating two unit quaternions."""
        relative: Quaternion = self.conjugate() * other
        return 2.0 * math.atan2(float(np.linalg.norm(relative.vec)), abs(relative.w))

    def almost_equal(self, other: "Quaternion", atol: float = 1e-9) -> bool:
        """Check approximate equality, accounting for sign ambiguity."""
        q1: NDArray[np.float64] = self.wxyz
        q2: NDArray[np.float64] = other.wxyz
        if np.allclose(q1, q2, atol=atol):
            return True
        return bool(np.allclose(q1, -q2, atol=atol))
