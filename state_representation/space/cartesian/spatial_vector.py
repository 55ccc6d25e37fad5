################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Shared behavior of the six-dimensional Cartesian specializations.

Twists, accelerations and wrenches each pair a linear and an angular
3-vector. They share the 6-D data layout, per-block clamping and 6x6 gain
multiplication defined here.
"""

from __future__ import annotations

from typing import Any
from typing import Tuple
from typing import Type
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from state_representation.config.state_params import DEFAULT_REFERENCE_FRAME
from state_representation.exceptions import IncompatibleSizeError
from state_representation.space.cartesian.cartesian_state import CartesianState
from state_representation.space.cartesian.cartesian_state import (
    CartesianStateVariable,
)


_SpatialVectorT = TypeVar("_SpatialVectorT", bound="SpatialVectorState")


class SpatialVectorState(CartesianState):
    """Cartesian state whose data is a linear and an angular 3-vector."""

    # Selector for the full 6-D block, then its linear and angular halves
    _VARIABLE: CartesianStateVariable = CartesianStateVariable.ALL
    _LINEAR: CartesianStateVariable = CartesianStateVariable.ALL
    _ANGULAR: CartesianStateVariable = CartesianStateVariable.ALL

    _PROJECTED_BLOCKS: Tuple[str, ...] = ()

    @classmethod
    def zero(
        cls: Type[_SpatialVectorT],
        name: str = "",
        reference_frame: str = DEFAULT_REFERENCE_FRAME,
    ) -> _SpatialVectorT:
        """Return a filled state with both vectors at zero."""
        return cls.identity(name, reference_frame)

    def data(self) -> NDArray[np.float64]:
        """Return [linear, angular]."""
        return self.get_state_variable(self._VARIABLE)

    def set_data(self, data: Any) -> None:
        """Set [linear, angular] from 6 values."""
        self.set_state_variable(data, self._VARIABLE)

    def clamp(
        self,
        max_linear: float,
        max_angular: float,
        linear_noise_ratio: float = 0.0,
        angular_noise_ratio: float = 0.0,
    ) -> None:
        """Clamp the linear and angular vectors in place, independently."""
        self.assert_not_empty()
        self.clamp_state_variable(max_linear, self._LINEAR, linear_noise_ratio)
        self.clamp_state_variable(max_angular, self._ANGULAR, angular_noise_ratio)

    def clamped(
        self: _SpatialVectorT,
        max_linear: float,
        max_angular: float,
        linear_noise_ratio: float = 0.0,
        angular_noise_ratio: float = 0.0,
    ) -> _SpatialVectorT:
        """Return a clamped copy."""
        result: _SpatialVectorT = self.copy()
        result.clamp(max_linear, max_angular, linear_noise_ratio, angular_noise_ratio)
        return result

    def multiply_gain(self: _SpatialVectorT, gain: Any) -> _SpatialVectorT:
        """Return the state with its 6-D data multiplied by a 6x6 gain."""
        self.assert_not_empty()
        matrix: NDArray[np.float64] = np.asarray(gain, dtype=float)
        if matrix.shape != (6, 6):
            raise IncompatibleSizeError(
                f"Gain matrix has incorrect size: expected (6, 6), given {matrix.shape}"
            )
        result: _SpatialVectorT = self.copy()
        result.set_data(matrix @ self.data())
        return result

    def _mul_array(self, array: NDArray[np.float64]) -> Any:
        return self.multiply_gain(array)
