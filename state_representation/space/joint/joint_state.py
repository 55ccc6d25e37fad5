################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Joint-space state of a robot.

A JointState holds an ordered list of joint names and four vectors of the
same length: positions, velocities, accelerations and torques. Flat data
uses the layout [positions, velocities, accelerations, torques].

Two joint states combine only when they share type, name and the exact
joint-name sequence. Joints are addressed by name or by index, and an index
must be strictly smaller than the number of joints.
"""

from __future__ import annotations

import numbers
from datetime import timedelta
from enum import Enum
from typing import Any
from typing import Dict
from typing import List
from typing import Sequence
from typing import Tuple
from typing import Type
from typing import TypeVar
from typing import Union

import numpy as np
from numpy.typing import NDArray

from state_representation.config.state_params import RANDOM_HIGH
from state_representation.config.state_params import RANDOM_LOW
from state_representation.exceptions import IncompatibleSizeError
from state_representation.exceptions import IncompatibleStatesError
from state_representation.exceptions import JointNotFoundError
from state_representation.math_utils.rng import get_generator
from state_representation.state import State
from state_representation.state import cast_state
from state_representation.state_type import StateType


_JointStateT = TypeVar("_JointStateT", bound="JointState")

JointNames = Union[int, Sequence[str]]
JointKey = Union[int, str]


class JointStateVariable(Enum):
    """Selector for one or all joint-space vectors."""

    POSITIONS = "positions"
    VELOCITIES = "velocities"
    ACCELERATIONS = "accelerations"
    TORQUES = "torques"
    ALL = "all"


# Storage order of the vectors, which is also the layout of ALL
_BLOCK_ORDER: Tuple[JointStateVariable, ...] = (
    JointStateVariable.POSITIONS,
    JointStateVariable.VELOCITIES,
    JointStateVariable.ACCELERATIONS,
    JointStateVariable.TORQUES,
)


def blocks_of(variable: JointStateVariable) -> Tuple[JointStateVariable, ...]:
    """Return the vectors addressed by a state variable selector."""
    if variable == JointStateVariable.ALL:
        return _BLOCK_ORDER
    return (variable,)


def _generate_names(nb_joints: int) -> List[str]:
    return [f"joint{index}" for index in range(nb_joints)]


def _as_names(joint_names: JointNames) -> List[str]:
    if isinstance(joint_names, numbers.Integral):
        if joint_names < 0:
            raise IncompatibleSizeError("Number of joints must be non-negative")
        return _generate_names(int(joint_names))
    return [str(name) for name in joint_names]


def _broadcast(values: Any, size: int, what: str) -> NDArray[np.float64]:
    """Return values as a vector of the given size, broadcasting scalars."""
    array: NDArray[np.float64] = np.asarray(values, dtype=float)
    if array.ndim == 0:
        return np.full(size, float(array), dtype=float)
    array = array.reshape(-1)
    if array.size != size:
        raise IncompatibleSizeError(
            f"Array of {what} is of incorrect size: expected {size}, given {array.size}"
        )
    return array


class JointState(State):
    """Positions, velocities, accelerations and torques of named joints."""

    _STATE_TYPE: StateType = StateType.JOINT_STATE

    # Vector exposed by data() and filled by random()
    _VARIABLE: JointStateVariable = JointStateVariable.ALL

    def __init__(self, name: str = "", joint_names: JointNames = 0) -> None:
        super().__init__(name, self._STATE_TYPE)
        self._names: List[str] = _as_names(joint_names)
        self._blocks: Dict[JointStateVariable, NDArray[np.float64]] = {}
        self.initialize()

    @classmethod
    def zero(
        cls: Type[_JointStateT], name: str, joint_names: JointNames
    ) -> _JointStateT:
        """Return a filled state with every vector at zero."""
        state: _JointStateT = cls(name, joint_names)
        state.set_filled()
        return state

    @classmethod
    def random(
        cls: Type[_JointStateT], name: str, joint_names: JointNames
    ) -> _JointStateT:
        """Return a state whose own vector is drawn uniformly at random."""
        state: _JointStateT = cls(name, joint_names)
        size: int = state.get_size() * len(blocks_of(cls._VARIABLE))
        state.set_state_variable(
            get_generator().uniform(RANDOM_LOW, RANDOM_HIGH, size=size), cls._VARIABLE
        )
        return state

    @classmethod
    def from_state(cls: Type[_JointStateT], state: JointState) -> _JointStateT:
        """Project a joint state onto this class, zeroing other vectors."""
        source: JointState = cast_state(state, JointState)
        result: _JointStateT = cls(source.get_name(), source.get_names())
        for block in blocks_of(cls._VARIABLE):
            result._blocks[block] = source._blocks[block].copy()
        result.set_empty(source.is_empty())
        result._timestamp_ns = source._timestamp_ns
        return result

    def initialize(self) -> None:
        """Reset to an empty state with zero vectors sized to the joints."""
        super().initialize()
        self.set_zero()

    def set_zero(self) -> None:
        """Zero the four vectors."""
        size: int = len(self._names)
        for block in _BLOCK_ORDER:
            self._blocks[block] = np.zeros(size, dtype=float)

    def get_size(self) -> int:
        """Return the number of joints."""
        return len(self._names)

    def get_names(self) -> List[str]:
        """Return a copy of the joint names."""
        return list(self._names)

    def set_names(self, joint_names: JointNames) -> None:
        """Rename the joints, keeping their number and values."""
        names: List[str] = _as_names(joint_names)
        if len(names) != len(self._names):
            raise IncompatibleSizeError(
                f"Input number of joints is of incorrect size, expected "
                f"{len(self._names)} got {len(names)}"
            )
        self._names = names

    def resize(self, joint_names: JointNames) -> None:
        """Replace the joints, resetting the state to empty zero vectors."""
        self._names = _as_names(joint_names)
        self.initialize()

    def get_joint_index(self, joint_name: str) -> int:
        """Return the index of a joint by name."""
        try:
            return self._names.index(joint_name)
        except ValueError:
            raise JointNotFoundError(
                f"The joint with name '{joint_name}' could not be found in the "
                f"joint state {self.get_name()}"
            ) from None

    def _index(self, joint: JointKey) -> int:
        if isinstance(joint, str):
            return self.get_joint_index(joint)
        index: int = int(joint)
        if index < 0 or index >= len(self._names):
            raise JointNotFoundError(
                f"Index '{index}' is out of range for joint state with size "
                f"{len(self._names)}"
            )
        return index

    def _get_joint(self, block: JointStateVariable, joint: JointKey) -> float:
        self.assert_not_empty()
        return float(self._blocks[block][self._index(joint)])

    def _set_joint(
        self, block: JointStateVariable, value: float, joint: JointKey
    ) -> None:
        index: int = self._index(joint)
        self._blocks[block][index] = float(value)
        self.set_filled()

    def get_position(self, joint: JointKey) -> float:
        """Return the position of one joint."""
        return self._get_joint(JointStateVariable.POSITIONS, joint)

    def get_velocity(self, joint: JointKey) -> float:
        """Return the velocity of one joint."""
        return self._get_joint(JointStateVariable.VELOCITIES, joint)

    def get_acceleration(self, joint: JointKey) -> float:
        """Return the acceleration of one joint."""
        return self._get_joint(JointStateVariable.ACCELERATIONS, joint)

    def get_torque(self, joint: JointKey) -> float:
        """Return the torque of one joint."""
        return self._get_joint(JointStateVariable.TORQUES, joint)

    def set_position(self, position: float, joint: JointKey) -> None:
        """Set the position of one joint."""
        self._set_joint(JointStateVariable.POSITIONS, position, joint)

    def set_velocity(self, velocity: float, joint: JointKey) -> None:
        """Set the velocity of one joint."""
        self._set_joint(JointStateVariable.VELOCITIES, velocity, joint)

    def set_acceleration(self, acceleration: float, joint: JointKey) -> None:
        """Set the acceleration of one joint."""
        self._set_joint(JointStateVariable.ACCELERATIONS, acceleration, joint)

    def set_torque(self, torque: float, joint: JointKey) -> None:
        """Set the torque of one joint."""
        self._set_joint(JointStateVariable.TORQUES, torque, joint)

    def get_positions(self) -> NDArray[np.float64]:
        return self.get_state_variable(JointStateVariable.POSITIONS)

    def get_velocities(self) -> NDArray[np.float64]:
        return self.get_state_variable(JointStateVariable.VELOCITIES)

    def get_accelerations(self) -> NDArray[np.float64]:
        return self.get_state_variable(JointStateVariable.ACCELERATIONS)

    def get_torques(self) -> NDArray[np.float64]:
        return self.get_state_variable(JointStateVariable.TORQUES)

    def set_positions(self, positions: Any) -> None:
        self.set_state_variable(positions, JointStateVariable.POSITIONS)

    def set_velocities(self, velocities: Any) -> None:
        self.set_state_variable(velocities, JointStateVariable.VELOCITIES)

    def set_accelerations(self, accelerations: Any) -> None:
        self.set_state_variable(accelerations, JointStateVariable.ACCELERATIONS)

    def set_torques(self, torques: Any) -> None:
        self.set_state_variable(torques, JointStateVariable.TORQUES)

    def get_state_variable(self, variable: JointStateVariable) -> NDArray[np.float64]:
        """Return the concatenation of the selected vectors."""
        self.assert_not_empty()
        return np.concatenate([self._blocks[block] for block in blocks_of(variable)])

    def set_state_variable(self, values: Any, variable: JointStateVariable) -> None:
        """Set the selected vectors from one flat vector."""
        blocks: Tuple[JointStateVariable, ...] = blocks_of(variable)
        size: int = len(self._names)
        vec: NDArray[np.float64] = np.asarray(values, dtype=float).reshape(-1)
        if vec.size != size * len(blocks):
            raise IncompatibleSizeError(
                f"Input is of incorrect size: expected {size * len(blocks)}, "
                f"given {vec.size}"
            )
        for offset, block in enumerate(blocks):
            self._blocks[block] = vec[offset * size : (offset + 1) * size].copy()
        self.set_filled()

    def data(self) -> NDArray[np.float64]:
        """Return the vector of this state kind as a flat array."""
        return self.get_state_variable(self._VARIABLE)

    def set_data(self, data: Any) -> None:
        """Set the vector of this state kind from a flat array."""
        self.set_state_variable(data, self._VARIABLE)

    def array(self) -> NDArray[np.float64]:
        """Return the four vectors as a 4 x N array."""
        self.assert_not_empty()
        return np.vstack([self._blocks[block] for block in _BLOCK_ORDER])

    def to_list(self) -> List[float]:
        """Return data() as a list of floats."""
        return [float(value) for value in self.data()]

    def is_compatible(self, other: State) -> bool:
        """Return True for the same type and name with identical joint names."""
        if not super().is_compatible(other) or not isinstance(other, JointState):
            return False
        return self._names == other._names

    def _assert_operand(self, other: Any) -> JointState:
        """Check emptiness of both operands, then compatibility."""
        self.assert_not_empty()
        operand: JointState = cast_state(other, JointState)
        operand.assert_not_empty()
        if not self.is_compatible(operand):
            raise IncompatibleStatesError(
                f"The joint states {self.get_name()} and {operand.get_name()} are "
                f"incompatible, check name, joint names and order or size"
            )
        return operand

    def clamp_state_variable(
        self,
        max_absolute_value: Any,
        variable: JointStateVariable,
        noise_ratio: Any = 0.0,
    ) -> None:
        """Apply a per-element dead zone, then saturate in place.

        Elements with |x| below noise_ratio * max_absolute_value are zeroed
        when noise_ratio is non-zero, elements above max_absolute_value are
        set to it with their sign kept, and the rest are left untouched.
        Scalar limits are broadcast to every element.
        """
        values: NDArray[np.float64] = self.get_state_variable(variable)
        size: int = values.size
        max_values: NDArray[np.float64] = _broadcast(
            max_absolute_value, size, "max values"
        )
        noise: NDArray[np.float64] = _broadcast(noise_ratio, size, "noise ratios")

        magnitudes: NDArray[np.float64] = np.abs(values)
        dead_zone: NDArray[np.bool_] = (noise != 0.0) & (
            magnitudes < noise * max_values
        )
        saturated: NDArray[np.bool_] = ~dead_zone & (magnitudes > max_values)
        result: NDArray[np.float64] = values.copy()
        result[dead_zone] = 0.0
        result[saturated] = np.sign(values[saturated]) * max_values[saturated]
        self.set_state_variable(result, variable)

    def multiply_state_variable(self, gain: Any, variable: JointStateVariable) -> None:
        """Multiply the selected vectors in place by an array or square matrix gain."""
        values: NDArray[np.float64] = self.get_state_variable(variable)
        size: int = values.size
        matrix: NDArray[np.float64] = np.asarray(gain, dtype=float)
        if matrix.ndim == 2:
            if matrix.shape != (size, size):
                raise IncompatibleSizeError(
                    f"Gain matrix is of incorrect size: expected {size}x{size}, "
                    f"given {matrix.shape[0]}x{matrix.shape[1]}"
                )
            self.set_state_variable(matrix @ values, variable)
            return
        if matrix.ndim != 1 or matrix.size != size:
            raise IncompatibleSizeError(
                f"Gain array is of incorrect size: expected {size}, given {matrix.size}"
            )
        self.set_state_variable(matrix * values, variable)

    def dist(
        self, other: JointState, variable: JointStateVariable = JointStateVariable.ALL
    ) -> float:
        """Return the summed Euclidean norms of the selected vector differences."""
        operand: JointState = self._assert_operand(other)
        result: float = 0.0
        for block in blocks_of(variable):
            result += float(
                np.linalg.norm(self._blocks[block] - operand._blocks[block])
            )
        return result

    def add(self: _JointStateT, other: JointState) -> _JointStateT:
        """Return the element-wise sum of all vectors."""
        operand: JointState = self._assert_operand(other)
        result: _JointStateT = self.copy()
        result.set_state_variable(
            self.get_state_variable(JointStateVariable.ALL)
            + operand.get_state_variable(JointStateVariable.ALL),
            JointStateVariable.ALL,
        )
        return result

    def subtract(self: _JointStateT, other: JointState) -> _JointStateT:
        """Return the element-wise difference of all vectors."""
        operand: JointState = self._assert_operand(other)
        result: _JointStateT = self.copy()
        result.set_state_variable(
            self.get_state_variable(JointStateVariable.ALL)
            - operand.get_state_variable(JointStateVariable.ALL),
            JointStateVariable.ALL,
        )
        return result

    def scale(self: _JointStateT, gain: Any) -> _JointStateT:
        """Return all vectors scaled by a scalar, an array or a square matrix."""
        self.assert_not_empty()
        result: _JointStateT = self.copy()
        if isinstance(gain, numbers.Real):
            result.set_state_variable(
                float(gain) * self.get_state_variable(JointStateVariable.ALL),
                JointStateVariable.ALL,
            )
        else:
            result.multiply_state_variable(gain, JointStateVariable.ALL)
        return result

    def negated(self: _JointStateT) -> _JointStateT:
        """Return the state with all vectors negated."""
        return self.scale(-1.0)

    def _mul_timedelta(self, dt: timedelta) -> Any:
        return NotImplemented

    def _div_timedelta(self, dt: timedelta) -> Any:
        return NotImplemented

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, State):
            return NotImplemented
        return self.add(other)  # type: ignore[arg-type]

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, State):
            return NotImplemented
        return self.subtract(other)  # type: ignore[arg-type]

    def __neg__(self: _JointStateT) -> _JointStateT:
        return self.negated()

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            return self._mul_timedelta(other)
        if isinstance(other, (numbers.Real, np.ndarray, list, tuple)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            return self._div_timedelta(other)
        if isinstance(other, numbers.Real):
            return self.scale(1.0 / float(other))
        return NotImplemented

    def __str__(self) -> str:
        if self.is_empty():
            return f"Empty {self.get_name()} {type(self).__name__}"
        lines: List[str] = [
            f"{self.get_name()} {type(self).__name__}",
            f"names: [{', '.join(self._names)}]",
        ]
        for block in blocks_of(self._VARIABLE):
            values: str = ", ".join(f"{value:g}" for value in self._blocks[block])
            lines.append(f"{block.value}: [{values}]")
        return "\n".join(lines)


class ClampableJointState(JointState):
    """Joint state kind that can be saturated as a whole."""

    def clamp(self, max_absolute_value: Any, noise_ratio: Any = 0.0) -> None:
        """Clamp this state's own vector in place."""
        self.clamp_state_variable(max_absolute_value, self._VARIABLE, noise_ratio)

    def clamped(
        self: _JointStateT, max_absolute_value: Any, noise_ratio: Any = 0.0
    ) -> _JointStateT:
        """Return a clamped copy."""
        result: _JointStateT = self.copy()
        result.clamp(max_absolute_value, noise_ratio)  # type: ignore[attr-defined]
        return result


def dist(
    state1: JointState,
    state2: JointState,
    variable: JointStateVariable = JointStateVariable.ALL,
) -> float:
    """Return the distance between two compatible joint states."""
    return state1.dist(state2, variable)
