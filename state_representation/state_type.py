################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Type tags identifying the concrete kind of a state."""

from __future__ import annotations

from enum import Enum


class StateType(Enum):
    """Tag carried by every state."""

    STATE = "state"
    SPATIAL_STATE = "spatial_state"
    CARTESIAN_STATE = "cartesian_state"
    CARTESIAN_POSE = "cartesian_pose"
    CARTESIAN_TWIST = "cartesian_twist"
    CARTESIAN_ACCELERATION = "cartesian_acceleration"
    CARTESIAN_WRENCH = "cartesian_wrench"
    JOINT_STATE = "joint_state"
    JOINT_POSITIONS = "joint_positions"
    JOINT_VELOCITIES = "joint_velocities"
    JOINT_ACCELERATIONS = "joint_accelerations"
    JOINT_TORQUES = "joint_torques"
    GEOMETRY_SHAPE = "geometry_shape"
    GEOMETRY_ELLIPSOID = "geometry_ellipsoid"
    PARAMETER = "parameter"

    def is_spatial(self) -> bool:
        """Return True for tags of states that carry a reference frame."""
        return self in _SPATIAL_TYPES


_SPATIAL_TYPES: frozenset[StateType] = frozenset(
    {
        StateType.SPATIAL_STATE,
        StateType.CARTESIAN_STATE,
        StateType.CARTESIAN_POSE,
        StateType.CARTESIAN_TWIST,
        StateType.CARTESIAN_ACCELERATION,
        StateType.CARTESIAN_WRENCH,
    }
)
