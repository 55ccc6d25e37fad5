################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Linear and angular velocity of a frame."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING
from typing import Any
from typing import Optional
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from state_representation.config.state_params import DEFAULT_REFERENCE_FRAME
from state_representation.math_utils.linalg import EPS
from state_representation.math_utils.quat import Quaternion
from state_representation.math_utils.units import Duration
from state_representation.math_utils.units import to_nonzero_seconds
from state_representation.math_utils.units import to_seconds
from state_representation.space.cartesian.cartesian_state import ANGULAR_VELOCITY
from state_representation.space.cartesian.cartesian_state import LINEAR_VELOCITY
from state_representation.space.cartesian.cartesian_state import CartesianState
from state_representation.space.cartesian.cartesian_state import (
    CartesianStateVariable,
)
from state_representation.space.cartesian.spatial_vector import SpatialVectorState
from state_representation.state_type import StateType


if TYPE_CHECKING:
    from state_representation.space.cartesian.cartesian_acceleration import (
        CartesianAcceleration,
    )
    from state_representation.space.cartesian.cartesian_pose import CartesianPose


class CartesianTwist(SpatialVectorState):
    """Twist with data layout [vx, vy, vz, wx, wy, wz]."""

    _STATE_TYPE: StateType = StateType.CARTESIAN_TWIST

    _VARIABLE: CartesianStateVariable = CartesianStateVariable.TWIST
    _LINEAR: CartesianStateVariable = CartesianStateVariable.LINEAR_VELOCITY
    _ANGULAR: CartesianStateVariable = CartesianStateVariable.ANGULAR_VELOCITY

    _PROJECTED_BLOCKS: Tuple[str, ...] = (LINEAR_VELOCITY, ANGULAR_VELOCITY)

    def __init__(
        self,
        name: str = "",
        linear_velocity: Optional[Any] = None,
        angular_velocity: Optional[Any] = None,
        reference_frame: str = DEFAULT_REFERENCE_FRAME,
    ) -> None:
        super().__init__(name, reference_frame)
        if linear_velocity is not None:
            self.set_linear_velocity(linear_velocity)
        if angular_velocity is not None:
            self.set_angular_velocity(angular_velocity)

    @classmethod
    def from_pose(cls, pose: CartesianState) -> CartesianTwist:
        """Return the twist reaching a pose in one second."""
        from state_representation.space.cartesian.cartesian_pose import (
            CartesianPose,
        )

        return CartesianPose.from_state(pose).differentiate(1.0)

    @classmethod
    def from_acceleration(cls, acceleration: CartesianState) -> CartesianTwist:
        """Return the twist gained under an acceleration held for one second."""
        from state_representation.space.cartesian.cartesian_acceleration import (
            CartesianAcceleration,
        )

        return CartesianAcceleration.from_state(acceleration).integrate(1.0)

    def integrate(self, dt: Duration) -> CartesianPose:
        """Return the displacement produced by holding the twist for dt.

        Position is v * dt and orientation is the exponential of the
        rotation vector w * dt.
        """
        from state_representation.space.cartesian.cartesian_pose import (
            CartesianPose,
        )

        self.assert_not_empty()
        period: float = to_seconds(dt)
        pose: CartesianPose = CartesianPose(
            self.get_name(), reference_frame=self.get_reference_frame()
        )
        pose.set_position(period * self.get_linear_velocity())

        rotation: NDArray[np.float64] = period * self.get_angular_velocity()
        angle: float = float(np.linalg.norm(rotation))
        if angle <= EPS:
            pose.set_orientation(Quaternion.identity())
        else:
            pose.set_orientation(Quaternion.from_axis_angle(rotation, angle))
        return pose

    def differentiate(self, dt: Duration) -> CartesianAcceleration:
        """Return the constant acceleration reaching this twist in dt."""
        from state_representation.space.cartesian.cartesian_acceleration import (
            CartesianAcceleration,
        )

        self.assert_not_empty()
        period: float = to_nonzero_seconds(dt)
        acceleration: CartesianAcceleration = CartesianAcceleration(
            self.get_name(), reference_frame=self.get_reference_frame()
        )
        acceleration.set_linear_acceleration(self.get_linear_velocity() / period)
        acceleration.set_angular_acceleration(self.get_angular_velocity() / period)
        return acceleration

    def _mul_timedelta(self, dt: timedelta) -> Any:
        return self.integrate(dt)

    def _div_timedelta(self, dt: timedelta) -> Any:
        return self.differentiate(dt)
