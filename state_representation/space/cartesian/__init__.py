################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Cartesian state and its pose, twist, acceleration and wrench kinds."""

from __future__ import annotations

from state_representation.space.cartesian.cartesian_state import CartesianState
from state_representation.space.cartesian.cartesian_state import (
    CartesianStateVariable,
)
from state_representation.space.cartesian.cartesian_twist import CartesianTwist
from state_representation.space.cartesian.cartesian_pose import CartesianPose
from state_representation.space.cartesian.cartesian_acceleration import (
    CartesianAcceleration,
)
from state_representation.space.cartesian.cartesian_wrench import CartesianWrench


__all__ = [
    "CartesianAcceleration",
    "CartesianPose",
    "CartesianState",
    "CartesianStateVariable",
    "CartesianTwist",
    "CartesianWrench",
]
