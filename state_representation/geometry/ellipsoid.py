################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Planar ellipse around a center pose.

The ellipse lies in the xy plane of its center frame, with semi-axis lengths
a and b along the x and y axes once rotated by rotation_angle about z.

Flat data layout: [cx, cy, cz, rotation_angle, a, b].
"""

from __future__ import annotations

import logging
import math
from typing import Any
from typing import List
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from state_representation.config.state_params import DEFAULT_REFERENCE_FRAME
from state_representation.exceptions import IncompatibleSizeError
from state_representation.exceptions import InvalidParameterError
from state_representation.geometry.shape import Shape
from state_representation.math_utils.quat import Quaternion
from state_representation.math_utils.rng import get_generator
from state_representation.space.cartesian.cartesian_pose import CartesianPose
from state_representation.space.cartesian.cartesian_state import CartesianState
from state_representation.state_type import StateType


_LOG: logging.Logger = logging.getLogger(__name__)


# Number of points needed to determine the five conic parameters
MIN_FIT_POINTS: int = 5

# Size of the flat data vector
DATA_SIZE: int = 6

_Z_AXIS: NDArray[np.float64] = np.array([0.0, 0.0, 1.0], dtype=float)


class Ellipsoid(Shape):
    """Ellipse with two axis lengths and a rotation about the center z axis."""

    _STATE_TYPE: StateType = StateType.GEOMETRY_ELLIPSOID

    def __init__(
        self, name: str = "", reference_frame: str = DEFAULT_REFERENCE_FRAME
    ) -> None:
        super().__init__(name, reference_frame)
        self._axis_lengths: NDArray[np.float64] = np.ones(2, dtype=float)
        self._rotation_angle: float = 0.0

    @classmethod
    def unit(
        cls, name: str, reference_frame: str = DEFAULT_REFERENCE_FRAME
    ) -> Ellipsoid:
        """Return a filled unit circle at the identity pose."""
        ellipsoid: Ellipsoid = cls(name, reference_frame)
        ellipsoid.set_filled()
        return ellipsoid

    def get_axis_lengths(self) -> NDArray[np.float64]:
        return self._axis_lengths.copy()

    def get_axis_length(self, index: int) -> float:
        """Return the semi-axis length along x (0) or y (1)."""
        if index not in (0, 1):
            raise IncompatibleSizeError(f"Axis index {index} is out of range")
        return float(self._axis_lengths[index])

    def set_axis_lengths(self, axis_lengths: Any) -> None:
        lengths: NDArray[np.float64] = np.asarray(axis_lengths, dtype=float).reshape(-1)
        if lengths.size != 2:
            raise IncompatibleSizeError(
                f"Axis lengths are of incorrect size: expected 2, given {lengths.size}"
            )
        self._axis_lengths = lengths
        self.set_filled()

    def set_axis_length(self, index: int, axis_length: float) -> None:
        if index not in (0, 1):
            raise IncompatibleSizeError(f"Axis index {index} is out of range")
        self._axis_lengths[index] = float(axis_length)
        self.set_filled()

    def get_rotation_angle(self) -> float:
        return self._rotation_angle

    def set_rotation_angle(self, rotation_angle: float) -> None:
        self._rotation_angle = float(rotation_angle)
        self.set_filled()

    def get_rotation(self) -> CartesianPose:
        """Return the rotation of the axes as a pose expressed in the center frame."""
        center_name: str = self._center_state.get_name()
        return CartesianPose(
            f"{center_name}_rotated",
            position=np.zeros(3, dtype=float),
            orientation=Quaternion.from_axis_angle(_Z_AXIS, self._rotation_angle),
            reference_frame=center_name,
        )

    def sample_from_parameterization(self, nb_samples: int) -> List[CartesianPose]:
        """Return evenly spaced points of the ellipse.

        The points are expressed in the reference frame of the center state.
        """
        self.assert_not_empty()
        center: CartesianPose = self.get_center_state()
        rotated: CartesianPose = center.compose(self.get_rotation())
        a: float = float(self._axis_lengths[0])
        b: float = float(self._axis_lengths[1])

        samples: List[CartesianPose] = []
        for index in range(nb_samples):
            theta: float = 2.0 * math.pi * index / nb_samples
            point: CartesianPose = CartesianPose(
                f"{self.get_name()}_point{index}",
                position=[a * math.cos(theta), b * math.sin(theta), 0.0],
                reference_frame=rotated.get_name(),
            )
            samples.append(rotated.compose(point))
        return samples

    @classmethod
    def from_algebraic_equation(
        cls,
        name: str,
        coefficients: Sequence[float],
        reference_frame: str = DEFAULT_REFERENCE_FRAME,
    ) -> Ellipsoid:
        """Return the ellipse A x^2 + B xy + C y^2 + D x + E y + F = 0.

        Raises InvalidParameterError when the conic is not a real ellipse.
        """
        values: NDArray[np.float64] = np.asarray(coefficients, dtype=float).reshape(-1)
        if values.size != 6:
            raise IncompatibleSizeError(
                f"Expected 6 conic coefficients, given {values.size}"
            )
        if values[0] < 0.0:
            values = -values
        A: float = float(values[0])
        B: float = float(values[1])
        C: float = float(values[2])
        D: float = float(values[3])
        E: float = float(values[4])
        F: float = float(values[5])

        denom: float = B * B - 4.0 * A * C
        if denom >= 0.0:
            raise InvalidParameterError(
                f"Coefficients of {name} do not describe an ellipse"
            )
        common: float = 2.0 * (A * E * E + C * D * D - B * D * E + denom * F)
        root: float = math.sqrt((A - C) ** 2 + B * B)
        major: float = common * ((A + C) + root)
        minor: float = common * ((A + C) - root)
        if major < 0.0 or minor < 0.0:
            raise InvalidParameterError(
                f"Coefficients of {name} describe an imaginary ellipse"
            )

        if B != 0.0:
            angle: float = math.atan((C - A - root) / B)
        elif A < C:
            angle = 0.0
        else:
            angle = 0.5 * math.pi

        ellipsoid: Ellipsoid = cls(name, reference_frame)
        ellipsoid.set_center_position(
            [(2.0 * C * D - B * E) / denom, (2.0 * A * E - B * D) / denom, 0.0]
        )
        ellipsoid.set_axis_lengths(
            [-math.sqrt(major) / denom, -math.sqrt(minor) / denom]
        )
        ellipsoid.set_rotation_angle(angle)
        return ellipsoid

    @classmethod
    def fit(
        cls,
        name: str,
        points: Sequence[CartesianState],
        reference_frame: str = DEFAULT_REFERENCE_FRAME,
        noise_level: float = 0.01,
    ) -> Ellipsoid:
        """Fit an ellipse to the xy positions of points.

        Direct least-squares fit in the numerically stable form of Halir and
        Flusser, after Fitzgibbon et al. Uniform noise of amplitude
        noise_level is added to the points first, so that exact conics do not
        produce singular scatter matrices.
        """
        if len(points) < MIN_FIT_POINTS:
            raise IncompatibleSizeError(
                f"At least {MIN_FIT_POINTS} points are needed to fit {name}, "
                f"given {len(points)}"
            )
        xy: NDArray[np.float64] = np.array(
            [point.get_position()[:2] for point in points], dtype=float
        )
        if noise_level > 0.0:
            xy = xy + get_generator().uniform(-noise_level, noise_level, size=xy.shape)
        x: NDArray[np.float64] = xy[:, 0]
        y: NDArray[np.float64] = xy[:, 1]

        D1: NDArray[np.float64] = np.column_stack((x * x, x * y, y * y))
        D2: NDArray[np.float64] = np.column_stack((x, y, np.ones_like(x)))
        S1: NDArray[np.float64] = D1.T @ D1
        S2: NDArray[np.float64] = D1.T @ D2
        S3: NDArray[np.float64] = D2.T @ D2
        T: NDArray[np.float64] = -np.linalg.solve(S3, S2.T)
        M: NDArray[np.float64] = S1 + S2 @ T
        # Premultiply by the inverse of the ellipse constraint matrix
        M = np.vstack((M[2] / 2.0, -M[1], M[0] / 2.0))

        eigenvectors: NDArray[Any]
        _, eigenvectors = np.linalg.eig(M)
        vectors: NDArray[np.float64] = np.real(eigenvectors)
        constraint: NDArray[np.float64] = (
            4.0 * vectors[0] * vectors[2] - vectors[1] * vectors[1]
        )
        candidates: NDArray[np.intp] = np.flatnonzero(constraint > 0.0)
        if candidates.size == 0:
            raise InvalidParameterError(f"Could not fit an ellipse for {name}")
        a1: NDArray[np.float64] = vectors[:, candidates[0]]
        coefficients: NDArray[np.float64] = np.concatenate((a1, T @ a1))

        _LOG.debug(
            "Fitted %s on %d points, conic coefficients %s",
            name,
            len(points),
            np.array2string(coefficients, precision=4),
        )
        return cls.from_algebraic_equation(name, coefficients, reference_frame)

    def to_list(self) -> List[float]:
        """Return [cx, cy, cz, rotation_angle, a, b]."""
        self.assert_not_empty()
        position: NDArray[np.float64] = self.get_center_position()
        return [
            *(float(value) for value in position),
            self._rotation_angle,
            *(float(value) for value in self._axis_lengths),
        ]

    def data(self) -> NDArray[np.float64]:
        return np.array(self.to_list(), dtype=float)

    def set_data(self, data: Any) -> None:
        """Set center position, rotation angle and axis lengths from 6 values."""
        values: NDArray[np.float64] = np.asarray(data, dtype=float).reshape(-1)
        if values.size != DATA_SIZE:
            raise IncompatibleSizeError(
                f"Input is of incorrect size: expected {DATA_SIZE}, given {values.size}"
            )
        self.set_center_position(values[:3])
        self.set_rotation_angle(float(values[3]))
        self.set_axis_lengths(values[4:])

    def __str__(self) -> str:
        if self.is_empty():
            return "Empty Ellipsoid"
        a: float = float(self._axis_lengths[0])
        b: float = float(self._axis_lengths[1])
        return (
            f"{super().__str__()}\n"
            f"axis lengths: [{a:g}, {b:g}]\n"
            f"rotation angle: {self._rotation_angle:g}"
        )
