################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for quaternion utilities."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from state_representation.math_utils import rng
from state_representation.math_utils.quat import Quaternion


def test_identity_properties() -> None:
    """Checks identity quaternion properties."""
    q: Quaternion = Quaternion.identity()
    assert np.allclose(q.as_matrix(), np.eye(3))
    assert np.allclose(q.log().wxyz, np.zeros(4))


def test_multiplication_inverse() -> None:
    """Checks quaternion multiplication with inverse returns identity."""
    q: Quaternion = Quaternion.from_axis_angle(np.array([2.0, 0.0, -1.0]), 0.3)
    identity: Quaternion = q * q.inverse()
    assert identity.almost_equal(Quaternion.identity())


def test_axis_angle_matches_rotation_matrix() -> None:
    """Checks axis-angle construction matches the z rotation matrix."""
    axis: NDArray[np.float64] = np.array([0.0, 0.0, 2.0], dtype=float)
    q: Quaternion = Quaternion.from_axis_angle(axis, 0.5)
    c: float = math.cos(0.5)
    s: float = math.sin(0.5)
    expected: NDArray[np.float64] = np.array(
        [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=float
    )
    assert np.allclose(q.as_matrix(), expected, atol=1e-12)


def test_log_exp_roundtrip() -> None:
    """Checks exp(log(q)) recovers q and scaling halves the angle."""
    q: Quaternion = Quaternion.from_axis_angle(np.array([1.0, 1.0, 0.0]), 1.2)
    log_q: Quaternion = q.log()
    assert log_q.w == 0.0
    assert np.isclose(np.linalg.norm(log_q.vec), 0.6)
    assert log_q.exp().almost_equal(q)

    half: Quaternion = log_q.exp(0.5)
    assert math.isclose(half.angular_distance(Quaternion.identity()), 0.6)


def test_angular_distance_ignores_sign() -> None:
    """Checks q and -q are at zero angular distance."""
    q: Quaternion = Quaternion.from_axis_angle(np.array([0.0, 1.0, 0.0]), 0.7)
    assert math.isclose(q.angular_distance(q.negated()), 0.0, abs_tol=1e-7)
    assert math.isclose(q.angular_distance(Quaternion.identity()), 0.7)


def test_random_is_unit_and_seeded() -> None:
    """Checks random quaternions are unit norm and reproducible."""
    rng.seed(7)
    first: Quaternion = Quaternion.random()
    rng.seed(7)
    second: Quaternion = Quaternion.random()
    rng.seed(None)
    assert math.isclose(first.norm(), 1.0)
    assert np.allclose(first.wxyz, second.wxyz)
