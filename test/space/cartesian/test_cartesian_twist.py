################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for twists, accelerations and wrenches."""

from __future__ import annotations

from datetime import timedelta

import numpy as np
import pytest

from state_representation.config.state_params import ClampParams
from state_representation.exceptions import IncompatibleSizeError
from state_representation.space.cartesian.cartesian_acceleration import (
    CartesianAcceleration,
)
from state_representation.space.cartesian.cartesian_pose import CartesianPose
from state_representation.space.cartesian.cartesian_twist import CartesianTwist
from state_representation.space.cartesian.cartesian_wrench import CartesianWrench


def test_twist_data_layout() -> None:
    """Checks the 6-value twist layout."""
    twist: CartesianTwist = CartesianTwist("t", [1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
    assert np.allclose(twist.data(), [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    twist.set_data(np.arange(6, dtype=float))
    assert np.allclose(twist.get_angular_velocity(), [3.0, 4.0, 5.0])
    with pytest.raises(IncompatibleSizeError):
        twist.set_data(np.zeros(7))


def test_twist_times_period_gives_pose() -> None:
    """Checks integration of a twist."""
    twist: CartesianTwist = CartesianTwist("t", [1.0, 0.0, 0.0], [0.0, 0.0, 0.0])
    pose: CartesianPose = twist * timedelta(seconds=2)
    assert isinstance(pose, CartesianPose)
    assert np.allclose(pose.get_position(), [2.0, 0.0, 0.0])
    assert np.allclose(pose.get_orientation_coefficients(), [1.0, 0.0, 0.0, 0.0])

    reversed_order: CartesianPose = timedelta(seconds=2) * twist
    assert np.allclose(reversed_order.data(), pose.data())


def test_twist_and_acceleration_conversions() -> None:
    """Checks differentiation and integration between twist and acceleration."""
    twist: CartesianTwist = CartesianTwist("t", [1.0, 2.0, 3.0], [0.5, 0.0, -0.5])
    acceleration: CartesianAcceleration = twist / timedelta(milliseconds=500)
    assert isinstance(acceleration, CartesianAcceleration)
    assert np.allclose(acceleration.data(), [2.0, 4.0, 6.0, 1.0, 0.0, -1.0])

    recovered: CartesianTwist = acceleration * timedelta(milliseconds=500)
    assert np.allclose(recovered.data(), twist.data())

    assert np.allclose(CartesianAcceleration.from_twist(twist).data(), twist.data())
    converted: CartesianTwist = CartesianTwist.from_acceleration(acceleration)
    assert np.allclose(converted.data(), acceleration.data())


def test_twist_from_pose_is_one_second_derivative() -> None:
    """Checks the explicit pose-to-twist conversion."""
    pose: CartesianPose = CartesianPose("p", [0.5, 0.0, 0.0])
    twist: CartesianTwist = CartesianTwist.from_pose(pose)
    assert np.allclose(twist.data(), [0.5, 0.0, 0.0, 0.0, 0.0, 0.0])


def test_clamp_linear_and_angular_independently() -> None:
    """Checks per-block clamping with separate limits."""
    twist: CartesianTwist = CartesianTwist("t", [3.0, 0.0, 4.0], [0.01, 0.0, 0.0])
    clamped: CartesianTwist = twist.clamped(1.0, 0.5, 0.0, 0.1)
    assert np.allclose(clamped.get_linear_velocity(), [0.6, 0.0, 0.8])
    assert np.allclose(clamped.get_angular_velocity(), np.zeros(3))
    assert np.allclose(twist.get_linear_velocity(), [3.0, 0.0, 4.0])


def test_clamp_params_apply_to_wrench() -> None:
    """Checks configured limits clamp a wrench."""
    params: ClampParams = ClampParams(max_linear=10.0, max_angular=1.0)
    wrench: CartesianWrench = CartesianWrench("w", [0.0, 20.0, 0.0], [0.0, 0.0, 0.5])
    clamped: CartesianWrench = params.clamp(wrench)
    assert np.allclose(clamped.get_force(), [0.0, 10.0, 0.0])
    assert np.allclose(clamped.get_torque(), [0.0, 0.0, 0.5])


def test_gain_multiplication() -> None:
    """Checks 6x6 gains multiply the 6-D data."""
    twist: CartesianTwist = CartesianTwist("t", [1.0, 1.0, 1.0], [1.0, 1.0, 1.0])
    gain: np.ndarray = np.diag([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    scaled: CartesianTwist = gain * twist
    assert isinstance(scaled, CartesianTwist)
    assert np.allclose(scaled.data(), [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
    with pytest.raises(IncompatibleSizeError):
        twist.multiply_gain(np.eye(3))


def test_zero_and_random_factories() -> None:
    """Checks the 6-D factories."""
    zero: CartesianAcceleration = CartesianAcceleration.zero("a")
    assert not zero.is_empty()
    assert np.allclose(zero.data(), np.zeros(6))

    random: CartesianWrench = CartesianWrench.random("w")
    assert np.all(np.abs(random.data()) <= 1.0)
    assert np.allclose(random.get_pose(), [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0])


def test_twist_composition_in_parent_frame() -> None:
    """Checks a twist expressed through a rotated parent pose."""
    parent: CartesianPose = CartesianPose("base", [0.0, 0.0, 0.0], [0.0, 0.0, 0.0, 1.0])
    twist: CartesianTwist = CartesianTwist(
        "tool", [1.0, 0.0, 0.0], [0.0, 0.0, 1.0], "base"
    )
    result: CartesianTwist = parent * twist
    assert isinstance(result, CartesianTwist)
    assert result.get_reference_frame() == "world"
    assert np.allclose(result.get_linear_velocity(), [-1.0, 0.0, 0.0])
    assert np.allclose(result.get_angular_velocity(), [0.0, 0.0, 1.0])
