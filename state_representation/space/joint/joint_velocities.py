################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Joint velocities."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING
from typing import Any
from typing import Optional

from state_representation.math_utils.units import Duration
from state_representation.math_utils.units import to_nonzero_seconds
from state_representation.math_utils.units import to_seconds
from state_representation.space.joint.joint_positions import JointPositions
from state_representation.space.joint.joint_state import ClampableJointState
from state_representation.space.joint.joint_state import JointNames
from state_representation.space.joint.joint_state import JointState
from state_representation.space.joint.joint_state import JointStateVariable
from state_representation.state_type import StateType


if TYPE_CHECKING:
    from state_representation.space.joint.joint_accelerations import (
        JointAccelerations,
    )


class JointVelocities(ClampableJointState):
    """Joint state whose data is the velocity vector."""

    _STATE_TYPE: StateType = StateType.JOINT_VELOCITIES
    _VARIABLE: JointStateVariable = JointStateVariable.VELOCITIES

    def __init__(
        self,
        name: str = "",
        joint_names: JointNames = 0,
        velocities: Optional[Any] = None,
    ) -> None:
        super().__init__(name, joint_names)
        if velocities is not None:
            self.set_velocities(velocities)

    @classmethod
    def from_positions(cls, positions: JointState) -> JointVelocities:
        """Return the velocities reaching positions in one second."""
        return JointPositions.from_state(positions).differentiate(1.0)

    @classmethod
    def from_accelerations(cls, accelerations: JointState) -> JointVelocities:
        """Return the velocities gained under accelerations held for one second."""
        from state_representation.space.joint.joint_accelerations import (
            JointAccelerations,
        )

        return JointAccelerations.from_state(accelerations).integrate(1.0)

    def integrate(self, dt: Duration) -> JointPositions:
        """Return the displacement produced by holding the velocities for dt."""
        period: float = to_seconds(dt)
        return JointPositions(
            self.get_name(), self.get_names(), period * self.get_velocities()
        )

    def differentiate(self, dt: Duration) -> JointAccelerations:
        """Return the constant accelerations reaching these velocities in dt."""
        from state_representation.space.joint.joint_accelerations import (
            JointAccelerations,
        )

        period: float = to_nonzero_seconds(dt)
        return JointAccelerations(
            self.get_name(), self.get_names(), self.get_velocities() / period
        )

    def _mul_timedelta(self, dt: timedelta) -> Any:
        return self.integrate(dt)

    def _div_timedelta(self, dt: timedelta) -> Any:
        return self.differentiate(dt)
