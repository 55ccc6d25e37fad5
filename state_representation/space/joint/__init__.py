################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Joint state and its position, velocity, acceleration and torque kinds."""

from __future__ import annotations

from state_representation.space.joint.joint_state import JointState
from state_representation.space.joint.joint_state import JointStateVariable
from state_representation.space.joint.joint_positions import JointPositions
from state_representation.space.joint.joint_velocities import JointVelocities
from state_representation.space.joint.joint_accelerations import JointAccelerations
from state_representation.space.joint.joint_torques import JointTorques


__all__ = [
    "JointAccelerations",
    "JointPositions",
    "JointState",
    "JointStateVariable",
    "JointTorques",
    "JointVelocities",
]
