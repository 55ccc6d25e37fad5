################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Geometric shapes anchored at a Cartesian pose."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from state_representation.config.state_params import DEFAULT_REFERENCE_FRAME
from state_representation.math_utils.quat import Quaternion
from state_representation.space.cartesian.cartesian_pose import CartesianPose
from state_representation.space.cartesian.cartesian_state import CartesianState
from state_representation.state import State
from state_representation.state import cast_state
from state_representation.state_type import StateType


class Shape(State):
    """Shape whose center is a pose in a reference frame.

    The center starts as an identity pose named after the shape. The shape
    itself stays empty until its center or its parameters are set.
    """

    _STATE_TYPE: StateType = StateType.GEOMETRY_SHAPE

    def __init__(
        self, name: str = "", reference_frame: str = DEFAULT_REFERENCE_FRAME
    ) -> None:
        super().__init__(name, self._STATE_TYPE)
        self._center_state: CartesianPose = CartesianPose.identity(
            name, reference_frame
        )

    def get_center_state(self) -> CartesianPose:
        """Return a copy of the center pose."""
        return self._center_state.copy()

    def get_center_pose(self) -> NDArray[np.float64]:
        """Return the center as [x, y, z, qw, qx, qy, qz]."""
        return self._center_state.get_pose()

    def get_center_position(self) -> NDArray[np.float64]:
        """Return the center position."""
        return self._center_state.get_position()

    def get_center_orientation(self) -> Quaternion:
        """Return the center orientation."""
        return self._center_state.get_orientation()

    def get_reference_frame(self) -> str:
        """Return the frame the center is expressed in."""
        return self._center_state.get_reference_frame()

    def set_center_state(self, state: State) -> None:
        """Set the center from a pose, keeping only its position and orientation."""
        pose: CartesianPose = CartesianPose.from_state(
            cast_state(state, CartesianState)
        )
        pose.assert_not_empty()
        self._center_state = pose
        self.set_filled()

    def set_center_pose(self, pose: Any) -> None:
        """Set the center from [x, y, z, qw, qx, qy, qz]."""
        self._center_state.set_pose(pose)
        self.set_filled()

    def set_center_position(self, position: Any) -> None:
        """Set the center position."""
        self._center_state.set_position(position)
        self.set_filled()

    def set_center_orientation(self, orientation: Any) -> None:
        """Set the center orientation."""
        self._center_state.set_orientation(orientation)
        self.set_filled()

    def __str__(self) -> str:
        if self.is_empty():
            return f"Empty {type(self).__name__}"
        return (
            f"{type(self).__name__} {self.get_name()} with state:\n"
            f"{self._center_state}"
        )
