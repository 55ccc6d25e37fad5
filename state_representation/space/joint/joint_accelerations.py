################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Joint accelerations."""

from __future__ import annotations

from datetime import timedelta
from typing import Any
from typing import Optional

from state_representation.math_utils.units import Duration
from state_representation.math_utils.units import to_seconds
from state_representation.space.joint.joint_state import ClampableJointState
from state_representation.space.joint.joint_state import JointNames
from state_representation.space.joint.joint_state import JointState
from state_representation.space.joint.joint_state import JointStateVariable
from state_representation.space.joint.joint_velocities import JointVelocities
from state_representation.state_type import StateType


class JointAccelerations(ClampableJointState):
    """Joint state whose data is the acceleration vector."""

    _STATE_TYPE: StateType = StateType.JOINT_ACCELERATIONS
    _VARIABLE: JointStateVariable = JointStateVariable.ACCELERATIONS

    def __init__(
        self,
        name: str = "",
        joint_names: JointNames = 0,
        accelerations: Optional[Any] = None,
    ) -> None:
        super().__init__(name, joint_names)
        if accelerations is not None:
            self.set_accelerations(accelerations)

    @classmethod
    def from_velocities(cls, velocities: JointState) -> JointAccelerations:
        """Return the accelerations reaching velocities in one second."""
        return JointVelocities.from_state(velocities).differentiate(1.0)

    def integrate(self, dt: Duration) -> JointVelocities:
        """Return the velocities gained by holding the accelerations for dt."""
        period: float = to_seconds(dt)
        return JointVelocities(
            self.get_name(), self.get_names(), period * self.get_accelerations()
        )

    def _mul_timedelta(self, dt: timedelta) -> Any:
        return self.integrate(dt)
