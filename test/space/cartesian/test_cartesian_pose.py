################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for Cartesian poses."""

from __future__ import annotations

import math
from datetime import timedelta

import numpy as np
import pytest
from numpy.typing import NDArray

from state_representation.exceptions import EmptyStateError
from state_representation.exceptions import IncompatibleSizeError
from state_representation.math_utils import rng
from state_representation.math_utils.quat import Quaternion
from state_representation.space.cartesian.cartesian_pose import CartesianPose
from state_representation.space.cartesian.cartesian_twist import CartesianTwist
from state_representation.state_type import StateType


def test_data_is_seven_values() -> None:
    """Checks the pose layout [x, y, z, qw, qx, qy, qz]."""
    pose: CartesianPose = CartesianPose("p", [1.0, 2.0, 3.0])
    assert pose.get_type() == StateType.CARTESIAN_POSE
    assert np.allclose(pose.data(), [1.0, 2.0, 3.0, 1.0, 0.0, 0.0, 0.0])

    pose.set_data([0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0])
    assert np.allclose(pose.get_orientation_coefficients(), [0.0, 1.0, 0.0, 0.0])
    with pytest.raises(IncompatibleSizeError):
        pose.set_data([0.0] * 6)


def test_identity_and_random_factories() -> None:
    """Checks factories produce filled poses."""
    identity: CartesianPose = CartesianPose.identity("p", "world")
    assert not identity.is_empty()
    assert np.allclose(identity.data(), [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0])

    rng.seed(11)
    random: CartesianPose = CartesianPose.random("p")
    rng.seed(None)
    assert np.linalg.norm(random.get_orientation_coefficients()) == pytest.approx(1.0)
    assert np.all(np.abs(random.get_position()) <= 1.0)
    assert np.allclose(random.get_twist(), np.zeros(6))


def test_divide_by_one_second_gives_twist() -> None:
    """Checks a translation divided by one second."""
    pose: CartesianPose = CartesianPose("p", [1.0, 0.0, 0.0])
    twist: CartesianTwist = pose / timedelta(seconds=1)
    assert isinstance(twist, CartesianTwist)
    assert twist.get_name() == "p"
    assert np.allclose(twist.get_linear_velocity(), [1.0, 0.0, 0.0])
    assert np.allclose(twist.get_angular_velocity(), [0.0, 0.0, 0.0])


def test_differentiate_rotation() -> None:
    """Checks the angular velocity of a rotation over a period."""
    q: Quaternion = Quaternion.from_axis_angle(np.array([0.0, 0.0, 1.0]), 0.4)
    pose: CartesianPose = CartesianPose("p", [0.0, 2.0, 0.0], q)
    twist: CartesianTwist = pose.differentiate(0.5)
    assert np.allclose(twist.get_linear_velocity(), [0.0, 4.0, 0.0])
    assert np.allclose(twist.get_angular_velocity(), [0.0, 0.0, 0.8])


def test_divide_then_multiply_recovers_pose() -> None:
    """Checks (P / dt) * dt reconstructs P."""
    dt: timedelta = timedelta(milliseconds=200)
    q: Quaternion = Quaternion.from_axis_angle(np.array([1.0, -2.0, 0.5]), 2.5)
    pose: CartesianPose = CartesianPose("p", [0.3, -0.7, 1.1], q, "world")
    recovered: CartesianPose = (pose / dt) * dt
    assert isinstance(recovered, CartesianPose)
    assert np.allclose(recovered.get_position(), pose.get_position())
    assert recovered.get_orientation().almost_equal(q, atol=1e-9)


def test_slow_rotation_over_long_period_recovers_pose() -> None:
    """Checks a small angular velocity still rotates over a long period."""
    q: Quaternion = Quaternion.from_axis_angle(np.array([0.0, 0.0, 1.0]), 0.05)
    pose: CartesianPose = CartesianPose("p", [1.0, 2.0, 3.0], q)
    dt: timedelta = timedelta(seconds=1000)

    twist: CartesianTwist = pose / dt
    assert np.allclose(twist.get_angular_velocity(), [0.0, 0.0, 5e-5])

    recovered: CartesianPose = twist * dt
    assert np.allclose(recovered.get_position(), [1.0, 2.0, 3.0])
    assert recovered.get_orientation().almost_equal(q, atol=1e-9)


def test_divide_by_period_requires_data() -> None:
    """Checks an empty pose cannot be differentiated."""
    with pytest.raises(EmptyStateError):
        CartesianPose("p") / timedelta(seconds=1)


def test_point_transform() -> None:
    """Checks pose * point maps a point into the reference frame."""
    q: Quaternion = Quaternion.from_axis_angle(np.array([0.0, 0.0, 1.0]), math.pi / 2)
    pose: CartesianPose = CartesianPose("p", [1.0, 0.0, 0.0], q)
    point: NDArray[np.float64] = pose * np.array([1.0, 0.0, 0.0])
    assert np.allclose(point, [1.0, 1.0, 0.0])
    with pytest.raises(IncompatibleSizeError):
        pose.transform_point([1.0, 2.0])


def test_from_twist_integrates_one_second() -> None:
    """Checks the explicit twist-to-pose conversion."""
    twist: CartesianTwist = CartesianTwist("t", [1.0, 2.0, 3.0], [0.0, 0.0, 0.3])
    pose: CartesianPose = CartesianPose.from_twist(twist)
    assert np.allclose(pose.get_position(), [1.0, 2.0, 3.0])
    expected: Quaternion = Quaternion.from_axis_angle(np.array([0.0, 0.0, 1.0]), 0.3)
    assert pose.get_orientation().almost_equal(expected)


def test_inverse_keeps_pose_type() -> None:
    """Checks a pose composed with its inverse is the identity pose."""
    q: Quaternion = Quaternion.from_axis_angle(np.array([0.3, 0.1, 1.0]), 1.1)
    pose: CartesianPose = CartesianPose("tool", [0.4, 0.5, -0.6], q, "world")
    inverse: CartesianPose = pose.inverse()
    assert isinstance(inverse, CartesianPose)
    identity: CartesianPose = pose * inverse
    assert np.allclose(identity.get_position(), np.zeros(3), atol=1e-12)
    assert identity.get_orientation().almost_equal(Quaternion.identity(), atol=1e-12)
