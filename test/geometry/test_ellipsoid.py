################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for shapes and ellipses."""

from __future__ import annotations

import math

import numpy as np
import pytest

from state_representation.exceptions import EmptyStateError
from state_representation.exceptions import IncompatibleSizeError
from state_representation.exceptions import InvalidParameterError
from state_representation.geometry.ellipsoid import Ellipsoid
from state_representation.geometry.shape import Shape
from state_representation.math_utils import rng
from state_representation.math_utils.quat import Quaternion
from state_representation.space.cartesian.cartesian_pose import CartesianPose
from state_representation.space.cartesian.cartesian_state import CartesianState


def test_shape_center_accessors() -> None:
    """Checks the center pose of a shape."""
    shape: Shape = Shape("obstacle", "world")
    assert shape.is_empty()
    assert str(shape) == "Empty Shape"
    assert np.allclose(shape.get_center_pose(), [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0])

    shape.set_center_position([1.0, 2.0, 0.0])
    assert not shape.is_empty()
    assert np.allclose(shape.get_center_position(), [1.0, 2.0, 0.0])
    assert shape.get_center_state().get_name() == "obstacle"
    assert shape.get_reference_frame() == "world"

    state: CartesianState = CartesianState.identity("obstacle", "robot")
    state.set_linear_velocity([1.0, 0.0, 0.0])
    shape.set_center_state(state)
    assert isinstance(shape.get_center_state(), CartesianPose)
    assert shape.get_reference_frame() == "robot"
    assert shape.get_center_orientation().almost_equal(Quaternion.identity())


def test_unit_ellipse_data() -> None:
    """Checks the flat layout of an ellipse."""
    ellipse: Ellipsoid = Ellipsoid.unit("e")
    assert ellipse.to_list() == [0.0, 0.0, 0.0, 0.0, 1.0, 1.0]

    ellipse.set_data([1.0, 2.0, 0.0, 0.5, 3.0, 2.0])
    assert ellipse.get_axis_length(0) == 3.0
    assert ellipse.get_rotation_angle() == 0.5
    assert np.allclose(ellipse.get_center_position(), [1.0, 2.0, 0.0])
    with pytest.raises(IncompatibleSizeError):
        ellipse.set_data([1.0, 2.0])
    with pytest.raises(IncompatibleSizeError):
        ellipse.get_axis_length(2)


def test_rotation_pose() -> None:
    """Checks the rotation is a z rotation in the center frame."""
    ellipse: Ellipsoid = Ellipsoid.unit("e", "world")
    ellipse.set_rotation_angle(math.pi / 2)
    rotation: CartesianPose = ellipse.get_rotation()
    assert rotation.get_name() == "e_rotated"
    assert rotation.get_reference_frame() == "e"
    assert np.allclose(rotation.get_position(), np.zeros(3))
    x_axis: np.ndarray = rotation.get_orientation().rotate(np.array([1.0, 0.0, 0.0]))
    assert np.allclose(x_axis, [0.0, 1.0, 0.0])


def test_sampling_lies_on_ellipse() -> None:
    """Checks sampled points satisfy the ellipse equation."""
    ellipse: Ellipsoid = Ellipsoid("e", "base")
    ellipse.set_data([1.0, -1.0, 0.0, math.pi / 2, 2.0, 1.0])
    samples: list[CartesianPose] = ellipse.sample_from_parameterization(8)
    assert len(samples) == 8
    assert all(sample.get_reference_frame() == "base" for sample in samples)
    # Major axis rotated onto y
    assert np.allclose(samples[0].get_position(), [1.0, 1.0, 0.0])
    for sample in samples:
        x: float
        y: float
        x, y = sample.get_position()[:2] - np.array([1.0, -1.0])
        assert (y / 2.0) ** 2 + (x / 1.0) ** 2 == pytest.approx(1.0)


def test_sampling_requires_data() -> None:
    """Checks an empty ellipse cannot be sampled."""
    with pytest.raises(EmptyStateError):
        Ellipsoid("e").sample_from_parameterization(4)


def test_from_algebraic_equation() -> None:
    """Checks the conversion from conic coefficients."""
    # x^2 + 4 y^2 - 4 = 0 has semi-axes 2 and 1
    ellipse: Ellipsoid = Ellipsoid.from_algebraic_equation(
        "e", [1.0, 0.0, 4.0, 0.0, 0.0, -4.0]
    )
    assert np.allclose(ellipse.get_axis_lengths(), [2.0, 1.0])
    assert ellipse.get_rotation_angle() == 0.0
    assert np.allclose(ellipse.get_center_position(), np.zeros(3))

    negated: Ellipsoid = Ellipsoid.from_algebraic_equation(
        "e", [-1.0, 0.0, -4.0, 0.0, 0.0, 4.0]
    )
    assert np.allclose(negated.to_list(), ellipse.to_list())

    with pytest.raises(InvalidParameterError):
        Ellipsoid.from_algebraic_equation("e", [1.0, 0.0, -1.0, 0.0, 0.0, -1.0])
    with pytest.raises(InvalidParameterError):
        Ellipsoid.from_algebraic_equation("e", [1.0, 0.0, 1.0, 0.0, 0.0, 1.0])
    with pytest.raises(IncompatibleSizeError):
        Ellipsoid.from_algebraic_equation("e", [1.0, 0.0, 1.0])


def test_fit_recovers_ellipse() -> None:
    """Checks the least-squares fit on sampled points."""
    truth: Ellipsoid = Ellipsoid("e", "world")
    truth.set_data([0.5, -0.3, 0.0, 0.4, 2.0, 1.0])
    points: list[CartesianPose] = truth.sample_from_parameterization(40)

    rng.seed(1)
    fitted: Ellipsoid = Ellipsoid.fit("fitted", points, noise_level=1e-6)
    rng.seed(None)
    assert fitted.get_name() == "fitted"
    assert np.allclose(fitted.get_center_position(), [0.5, -0.3, 0.0], atol=1e-4)
    assert np.allclose(fitted.get_axis_lengths(), [2.0, 1.0], atol=1e-4)
    assert fitted.get_rotation_angle() == pytest.approx(0.4, abs=1e-4)


def test_fit_needs_five_points() -> None:
    """Checks the minimum number of points."""
    points: list[CartesianPose] = Ellipsoid.unit("e").sample_from_parameterization(4)
    with pytest.raises(IncompatibleSizeError):
        Ellipsoid.fit("e", points)
