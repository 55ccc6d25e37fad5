################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Linear and angular acceleration of a frame."""

from __future__ import annotations

from datetime import timedelta
from typing import Any
from typing import Optional
from typing import Tuple

from state_representation.config.state_params import DEFAULT_REFERENCE_FRAME
from state_representation.math_utils.units import Duration
from state_representation.math_utils.units import to_seconds
from state_representation.space.cartesian.cartesian_state import ANGULAR_ACCELERATION
from state_representation.space.cartesian.cartesian_state import LINEAR_ACCELERATION
from state_representation.space.cartesian.cartesian_state import CartesianState
from state_representation.space.cartesian.cartesian_state import (
    CartesianStateVariable,
)
from state_representation.space.cartesian.cartesian_twist import CartesianTwist
from state_representation.space.cartesian.spatial_vector import SpatialVectorState
from state_representation.state_type import StateType


class CartesianAcceleration(SpatialVectorState):
    """Acceleration with data layout [ax, ay, az, alpha_x, alpha_y, alpha_z]."""

    _STATE_TYPE: StateType = StateType.CARTESIAN_ACCELERATION

    _VARIABLE: CartesianStateVariable = CartesianStateVariable.ACCELERATION
    _LINEAR: CartesianStateVariable = CartesianStateVariable.LINEAR_ACCELERATION
    _ANGULAR: CartesianStateVariable = CartesianStateVariable.ANGULAR_ACCELERATION

    _PROJECTED_BLOCKS: Tuple[str, ...] = (LINEAR_ACCELERATION, ANGULAR_ACCELERATION)

    def __init__(
        self,
        name: str = "",
        linear_acceleration: Optional[Any] = None,
        angular_acceleration: Optional[Any] = None,
        reference_frame: str = DEFAULT_REFERENCE_FRAME,
    ) -> None:
        super().__init__(name, reference_frame)
        if linear_acceleration is not None:
            self.set_linear_acceleration(linear_acceleration)
        if angular_acceleration is not None:
            self.set_angular_acceleration(angular_acceleration)

    @classmethod
    def from_twist(cls, twist: CartesianState) -> CartesianAcceleration:
        """Return the acceleration reaching a twist in one second."""
        return CartesianTwist.from_state(twist).differentiate(1.0)

    def integrate(self, dt: Duration) -> CartesianTwist:
        """Return the velocity gained by holding the acceleration for dt."""
        self.assert_not_empty()
        period: float = to_seconds(dt)
        twist: CartesianTwist = CartesianTwist(
            self.get_name(), reference_frame=self.get_reference_frame()
        )
        twist.set_linear_velocity(period * self.get_linear_acceleration())
        twist.set_angular_velocity(period * self.get_angular_acceleration())
        return twist

    def _mul_timedelta(self, dt: timedelta) -> Any:
        return self.integrate(dt)
