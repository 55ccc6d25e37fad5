################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Position and orientation of a frame."""

from __future__ import annotations

from datetime import timedelta
from typing import Any
from typing import Optional
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from state_representation.config.state_params import DEFAULT_REFERENCE_FRAME
from state_representation.exceptions import IncompatibleSizeError
from state_representation.math_utils.quat import Quaternion
from state_representation.math_utils.units import Duration
from state_representation.math_utils.units import to_nonzero_seconds
from state_representation.space.cartesian.cartesian_state import ORIENTATION
from state_representation.space.cartesian.cartesian_state import POSITION
from state_representation.space.cartesian.cartesian_state import CartesianState
from state_representation.space.cartesian.cartesian_twist import CartesianTwist
from state_representation.state_type import StateType


class CartesianPose(CartesianState):
    """Pose with data layout [x, y, z, qw, qx, qy, qz]."""

    _STATE_TYPE: StateType = StateType.CARTESIAN_POSE

    _PROJECTED_BLOCKS: Tuple[str, ...] = (POSITION, ORIENTATION)

    def __init__(
        self,
        name: str = "",
        position: Optional[Any] = None,
        orientation: Optional[Any] = None,
        reference_frame: str = DEFAULT_REFERENCE_FRAME,
    ) -> None:
        super().__init__(name, reference_frame)
        if position is not None:
            self.set_position(position)
        if orientation is not None:
            self.set_orientation(orientation)

    @classmethod
    def from_twist(cls, twist: CartesianState) -> CartesianPose:
        """Return the pose reached by applying a twist for one second."""
        return CartesianTwist.from_state(twist).integrate(1.0)

    def data(self) -> NDArray[np.float64]:
        """Return [x, y, z, qw, qx, qy, qz]."""
        return self.get_pose()

    def set_data(self, data: Any) -> None:
        """Set the pose from 7 values."""
        self.set_pose(data)

    def transform_point(self, point: Any) -> NDArray[np.float64]:
        """Return a 3-D point of this frame expressed in the reference frame."""
        vec: NDArray[np.float64] = np.asarray(point, dtype=float).reshape(-1)
        if vec.size != 3:
            raise IncompatibleSizeError(
                f"Point has incorrect size: expected 3, given {vec.size}"
            )
        return self.get_orientation().rotate(vec) + self.get_position()

    def differentiate(self, dt: Duration) -> CartesianTwist:
        """Return the twist that moves the reference frame onto this pose in dt.

        The angular velocity is twice the quaternion logarithm over the
        period, with the logarithm negated when its dot product with the
        orientation is negative.
        """
        self.assert_not_empty()
        period: float = to_nonzero_seconds(dt)
        orientation: Quaternion = self.get_orientation()
        log_q: Quaternion = orientation.log()
        if orientation.dot(log_q) < 0.0:
            log_q = log_q.negated()

        twist: CartesianTwist = CartesianTwist(
            self.get_name(), reference_frame=self.get_reference_frame()
        )
        twist.set_linear_velocity(self.get_position() / period)
        twist.set_angular_velocity(2.0 * log_q.vec / period)
        return twist

    def _mul_array(self, array: NDArray[np.float64]) -> Any:
        if array.ndim == 1:
            return self.transform_point(array)
        return NotImplemented

    def _div_timedelta(self, dt: timedelta) -> Any:
        return self.differentiate(dt)
