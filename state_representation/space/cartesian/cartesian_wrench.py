################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Force and torque applied at the origin of a frame."""

from __future__ import annotations

from typing import Any
from typing import Optional
from typing import Tuple

from state_representation.config.state_params import DEFAULT_REFERENCE_FRAME
from state_representation.space.cartesian.cartesian_state import FORCE
from state_representation.space.cartesian.cartesian_state import TORQUE
from state_representation.space.cartesian.cartesian_state import (
    CartesianStateVariable,
)
from state_representation.space.cartesian.spatial_vector import SpatialVectorState
from state_representation.state_type import StateType


class CartesianWrench(SpatialVectorState):
    """Wrench with data layout [fx, fy, fz, tx, ty, tz]."""

    _STATE_TYPE: StateType = StateType.CARTESIAN_WRENCH

    _VARIABLE: CartesianStateVariable = CartesianStateVariable.WRENCH
    _LINEAR: CartesianStateVariable = CartesianStateVariable.FORCE
    _ANGULAR: CartesianStateVariable = CartesianStateVariable.TORQUE

    _PROJECTED_BLOCKS: Tuple[str, ...] = (FORCE, TORQUE)

    def __init__(
        self,
        name: str = "",
        force: Optional[Any] = None,
        torque: Optional[Any] = None,
        reference_frame: str = DEFAULT_REFERENCE_FRAME,
    ) -> None:
        super().__init__(name, reference_frame)
        if force is not None:
            self.set_force(force)
        if torque is not None:
            self.set_torque(torque)
