################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Joint torques."""

from __future__ import annotations

from typing import Any
from typing import Optional

from state_representation.space.joint.joint_state import ClampableJointState
from state_representation.space.joint.joint_state import JointNames
from state_representation.space.joint.joint_state import JointStateVariable
from state_representation.state_type import StateType


class JointTorques(ClampableJointState):
    """Joint state whose data is the torque vector."""

    _STATE_TYPE: StateType = StateType.JOINT_TORQUES
    _VARIABLE: JointStateVariable = JointStateVariable.TORQUES

    def __init__(
        self,
        name: str = "",
        joint_names: JointNames = 0,
        torques: Optional[Any] = None,
    ) -> None:
        super().__init__(name, joint_names)
        if torques is not None:
            self.set_torques(torques)
