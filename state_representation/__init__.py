################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Typed Cartesian, joint-space and geometric states for robot control."""

from __future__ import annotations

from state_representation.exceptions import EmptyStateError
from state_representation.exceptions import IncompatibleReferenceFramesError
from state_representation.exceptions import IncompatibleSizeError
from state_representation.exceptions import IncompatibleStatesError
from state_representation.exceptions import InvalidCastError
from state_representation.exceptions import InvalidParameterError
from state_representation.exceptions import JointNotFoundError
from state_representation.exceptions import StateNotImplementedError
from state_representation.exceptions import StateRepresentationError
from state_representation.geometry.ellipsoid import Ellipsoid
from state_representation.geometry.shape import Shape
from state_representation.parameters.parameter import Parameter
from state_representation.parameters.parameter import ParameterType
from state_representation.parameters.parameter_map import ParameterMap
from state_representation.space.cartesian.cartesian_acceleration import (
    CartesianAcceleration,
)
from state_representation.space.cartesian.cartesian_pose import CartesianPose
from state_representation.space.cartesian.cartesian_state import CartesianState
from state_representation.space.cartesian.cartesian_state import (
    CartesianStateVariable,
)
from state_representation.space.cartesian.cartesian_twist import CartesianTwist
from state_representation.space.cartesian.cartesian_wrench import CartesianWrench
from state_representation.space.joint.joint_accelerations import JointAccelerations
from state_representation.space.joint.joint_positions import JointPositions
from state_representation.space.joint.joint_state import JointState
from state_representation.space.joint.joint_state import JointStateVariable
from state_representation.space.joint.joint_torques import JointTorques
from state_representation.space.joint.joint_velocities import JointVelocities
from state_representation.space.spatial_state import SpatialState
from state_representation.state import State
from state_representation.state_type import StateType


__all__ = [
    "CartesianAcceleration",
    "CartesianPose",
    "CartesianState",
    "CartesianStateVariable",
    "CartesianTwist",
    "CartesianWrench",
    "Ellipsoid",
    "EmptyStateError",
    "IncompatibleReferenceFramesError",
    "IncompatibleSizeError",
    "IncompatibleStatesError",
    "InvalidCastError",
    "InvalidParameterError",
    "JointAccelerations",
    "JointNotFoundError",
    "JointPositions",
    "JointState",
    "JointStateVariable",
    "JointTorques",
    "JointVelocities",
    "Parameter",
    "ParameterMap",
    "ParameterType",
    "Shape",
    "SpatialState",
    "State",
    "StateNotImplementedError",
    "StateRepresentationError",
    "StateType",
]
