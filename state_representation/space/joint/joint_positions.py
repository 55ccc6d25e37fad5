################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Joint positions."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING
from typing import Any
from typing import Optional

from state_representation.math_utils.units import Duration
from state_representation.math_utils.units import to_nonzero_seconds
from state_representation.space.joint.joint_state import JointNames
from state_representation.space.joint.joint_state import JointState
from state_representation.space.joint.joint_state import JointStateVariable
from state_representation.state_type import StateType


if TYPE_CHECKING:
    from state_representation.space.joint.joint_velocities import JointVelocities


class JointPositions(JointState):
    """Joint state whose data is the position vector."""

    _STATE_TYPE: StateType = StateType.JOINT_POSITIONS
    _VARIABLE: JointStateVariable = JointStateVariable.POSITIONS

    def __init__(
        self,
        name: str = "",
        joint_names: JointNames = 0,
        positions: Optional[Any] = None,
    ) -> None:
        super().__init__(name, joint_names)
        if positions is not None:
            self.set_positions(positions)

    @classmethod
    def from_velocities(cls, velocities: JointState) -> JointPositions:
        """Return the displacement of velocities held for one second."""
        from state_representation.space.joint.joint_velocities import (
            JointVelocities,
        )

        return JointVelocities.from_state(velocities).integrate(1.0)

    def differentiate(self, dt: Duration) -> JointVelocities:
        """Return the constant velocities reaching these positions in dt."""
        from state_representation.space.joint.joint_velocities import (
            JointVelocities,
        )

        period: float = to_nonzero_seconds(dt)
        return JointVelocities(
            self.get_name(), self.get_names(), self.get_positions() / period
        )

    def _div_timedelta(self, dt: timedelta) -> Any:
        return self.differentiate(dt)
