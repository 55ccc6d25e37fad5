################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Full Cartesian state of a frame expressed in a reference frame.

A CartesianState holds eight blocks: position, orientation (unit quaternion,
wxyz), linear and angular velocity, linear and angular acceleration, force
and torque. Derivative quantities are expressed in the reference frame.

Composition chains frames: if A is frame b expressed in f and B is frame c
expressed in b, then A * B is frame c expressed in f.

With R, p, v, w, a, dw, F, T the rotation, position, velocities,
accelerations and wrench of A, and primed symbols those of B:

    p_c = p + R p'
    v_c = v + R v' + w x (R p')
    w_c = w + R w'
    a_c = a + R a' + dw x (R p') + 2 w x (R v') + w x (w x (R p'))
    dw_c = dw + R dw' + w x (R w')
    F_c = F + R F'
    T_c = T + R T' - (R p') x F

so that the wrench of the result is measured at the origin of c.
"""

from __future__ import annotations

import numbers
from datetime import timedelta
from enum import Enum
from typing import Any
from typing import Dict
from typing import List
from typing import Tuple
from typing import Type
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from state_representation.config.state_params import DEFAULT_REFERENCE_FRAME
from state_representation.config.state_params import RANDOM_HIGH
from state_representation.config.state_params import RANDOM_LOW
from state_representation.exceptions import IncompatibleReferenceFramesError
from state_representation.exceptions import IncompatibleSizeError
from state_representation.exceptions import StateNotImplementedError
from state_representation.math_utils.linalg import Linalg
from state_representation.math_utils.quat import Quaternion
from state_representation.math_utils.rng import get_generator
from state_representation.state import State
from state_representation.state import cast_state
from state_representation.space.spatial_state import SpatialState
from state_representation.state_type import StateType


_CartesianT = TypeVar("_CartesianT", bound="CartesianState")


class CartesianStateVariable(Enum):
    """Selector for one or several blocks of a Cartesian state."""

    POSITION = "position"
    ORIENTATION = "orientation"
    POSE = "pose"
    LINEAR_VELOCITY = "linear_velocity"
    ANGULAR_VELOCITY = "angular_velocity"
    TWIST = "twist"
    LINEAR_ACCELERATION = "linear_acceleration"
    ANGULAR_ACCELERATION = "angular_acceleration"
    ACCELERATION = "acceleration"
    FORCE = "force"
    TORQUE = "torque"
    WRENCH = "wrench"
    ALL = "all"


POSITION: str = "position"
ORIENTATION: str = "orientation"
LINEAR_VELOCITY: str = "linear_velocity"
ANGULAR_VELOCITY: str = "angular_velocity"
LINEAR_ACCELERATION: str = "linear_acceleration"
ANGULAR_ACCELERATION: str = "angular_acceleration"
FORCE: str = "force"
TORQUE: str = "torque"

# Storage order of the blocks, which is also the layout of data()
BLOCK_SIZES: Dict[str, int] = {
    POSITION: 3,
    ORIENTATION: 4,
    LINEAR_VELOCITY: 3,
    ANGULAR_VELOCITY: 3,
    LINEAR_ACCELERATION: 3,
    ANGULAR_ACCELERATION: 3,
    FORCE: 3,
    TORQUE: 3,
}

_VARIABLE_BLOCKS: Dict[CartesianStateVariable, Tuple[str, ...]] = {
    CartesianStateVariable.POSITION: (POSITION,),
    CartesianStateVariable.ORIENTATION: (ORIENTATION,),
    CartesianStateVariable.POSE: (POSITION, ORIENTATION),
    CartesianStateVariable.LINEAR_VELOCITY: (LINEAR_VELOCITY,),
    CartesianStateVariable.ANGULAR_VELOCITY: (ANGULAR_VELOCITY,),
    CartesianStateVariable.TWIST: (LINEAR_VELOCITY, ANGULAR_VELOCITY),
    CartesianStateVariable.LINEAR_ACCELERATION: (LINEAR_ACCELERATION,),
    CartesianStateVariable.ANGULAR_ACCELERATION: (ANGULAR_ACCELERATION,),
    CartesianStateVariable.ACCELERATION: (LINEAR_ACCELERATION, ANGULAR_ACCELERATION),
    CartesianStateVariable.FORCE: (FORCE,),
    CartesianStateVariable.TORQUE: (TORQUE,),
    CartesianStateVariable.WRENCH: (FORCE, TORQUE),
    CartesianStateVariable.ALL: tuple(BLOCK_SIZES),
}

_IDENTITY_WXYZ: NDArray[np.float64] = np.array([1.0, 0.0, 0.0, 0.0], dtype=float)


def blocks_of(variable: CartesianStateVariable) -> Tuple[str, ...]:
    """Return the block names addressed by a state variable selector."""
    return _VARIABLE_BLOCKS[variable]


def _block_values(values: Any, block: str) -> NDArray[np.float64]:
    """Return values checked against a block size, orientations normalized."""
    if block == ORIENTATION and isinstance(values, Quaternion):
        return values.normalized().to_wxyz()
    size: int = BLOCK_SIZES[block]
    vec: NDArray[np.float64] = np.asarray(values, dtype=float).reshape(-1)
    if vec.size != size:
        raise IncompatibleSizeError(
            f"Input {block} is of incorrect size: expected {size}, given {vec.size}"
        )
    if block == ORIENTATION:
        return Quaternion(vec).normalized().to_wxyz()
    return Linalg.as_vector(vec, size, block)


class CartesianState(SpatialState):
    """Pose, twist, acceleration and wrench of a frame."""

    _STATE_TYPE: StateType = StateType.CARTESIAN_STATE

    # Blocks kept by from_state() and shown by str()
    _PROJECTED_BLOCKS: Tuple[str, ...] = tuple(BLOCK_SIZES)

    def __init__(
        self, name: str = "", reference_frame: str = DEFAULT_REFERENCE_FRAME
    ) -> None:
        super().__init__(name, reference_frame, self._STATE_TYPE)
        self._blocks: Dict[str, NDArray[np.float64]] = {}
        self.initialize()

    @classmethod
    def identity(
        cls: Type[_CartesianT],
        name: str = "",
        reference_frame: str = DEFAULT_REFERENCE_FRAME,
    ) -> _CartesianT:
        """Return a filled state at the origin with identity orientation."""
        state: _CartesianT = cls(name=name, reference_frame=reference_frame)
        state.set_filled()
        return state

    @classmethod
    def random(
        cls: Type[_CartesianT],
        name: str = "",
        reference_frame: str = DEFAULT_REFERENCE_FRAME,
    ) -> _CartesianT:
        """Return a state with every projected block drawn at random."""
        state: _CartesianT = cls(name=name, reference_frame=reference_frame)
        rng: np.random.Generator = get_generator()
        for block in cls._PROJECTED_BLOCKS:
            if block == ORIENTATION:
                state._blocks[block] = Quaternion.random().to_wxyz()
            else:
                state._blocks[block] = rng.uniform(
                    RANDOM_LOW, RANDOM_HIGH, size=BLOCK_SIZES[block]
                )
        state.set_filled()
        return state

    @classmethod
    def from_state(cls: Type[_CartesianT], state: CartesianState) -> _CartesianT:
        """Project a Cartesian state onto this class, zeroing other blocks."""
        source: CartesianState = cast_state(state, CartesianState)
        result: _CartesianT = cls(
            name=source.get_name(), reference_frame=source.get_reference_frame()
        )
        for block in cls._PROJECTED_BLOCKS:
            result._blocks[block] = source._blocks[block].copy()
        result.set_empty(source.is_empty())
        result._timestamp_ns = source._timestamp_ns
        return result

    def initialize(self) -> None:
        """Reset to an empty state at the origin."""
        super().initialize()
        self.set_zero()

    def set_zero(self) -> None:
        """Zero every block and set the orientation to identity."""
        for block, size in BLOCK_SIZES.items():
            self._blocks[block] = np.zeros(size, dtype=float)
        self._blocks[ORIENTATION] = _IDENTITY_WXYZ.copy()

    def _get(self, block: str) -> NDArray[np.float64]:
        self.assert_not_empty()
        return self._blocks[block].copy()

    def _set(self, block: str, values: Any) -> None:
        self._blocks[block] = _block_values(values, block)
        self.set_filled()

    def get_position(self) -> NDArray[np.float64]:
        """Return the position."""
        return self._get(POSITION)

    def get_orientation(self) -> Quaternion:
        """Return the orientation quaternion."""
        return Quaternion(self._get(ORIENTATION))

    def get_orientation_coefficients(self) -> NDArray[np.float64]:
        """Return the orientation as [qw, qx, qy, qz]."""
        return self._get(ORIENTATION)

    def get_pose(self) -> NDArray[np.float64]:
        """Return [x, y, z, qw, qx, qy, qz]."""
        return self.get_state_variable(CartesianStateVariable.POSE)

    def get_transformation_matrix(self) -> NDArray[np.float64]:
        """Return the homogeneous 4x4 transform of the pose."""
        mat: NDArray[np.float64] = np.eye(4, dtype=float)
        mat[:3, :3] = self.get_orientation().as_matrix()
        mat[:3, 3] = self.get_position()
        return mat

    def get_linear_velocity(self) -> NDArray[np.float64]:
        """Return the linear velocity."""
        return self._get(LINEAR_VELOCITY)

    def get_angular_velocity(self) -> NDArray[np.float64]:
        """Return the angular velocity."""
        return self._get(ANGULAR_VELOCITY)

    def get_twist(self) -> NDArray[np.float64]:
        """Return [linear velocity, angular velocity]."""
        return self.get_state_variable(CartesianStateVariable.TWIST)

    def get_linear_acceleration(self) -> NDArray[np.float64]:
        """Return the linear acceleration."""
        return self._get(LINEAR_ACCELERATION)

    def get_angular_acceleration(self) -> NDArray[np.float64]:
        """Return the angular acceleration."""
        return self._get(ANGULAR_ACCELERATION)

    def get_acceleration(self) -> NDArray[np.float64]:
        """Return [linear acceleration, angular acceleration]."""
        return self.get_state_variable(CartesianStateVariable.ACCELERATION)

    def get_force(self) -> NDArray[np.float64]:
        """Return the force."""
        return self._get(FORCE)

    def get_torque(self) -> NDArray[np.float64]:
        """Return the torque."""
        return self._get(TORQUE)

    def get_wrench(self) -> NDArray[np.float64]:
        """Return [force, torque]."""
        return self.get_state_variable(CartesianStateVariable.WRENCH)

    def set_position(self, position: Any) -> None:
        """Set the position."""
        self._set(POSITION, position)

    def set_orientation(self, orientation: Any) -> None:
        """Set the orientation from a Quaternion or wxyz values, normalized."""
        self._set(ORIENTATION, orientation)

    def set_pose(self, pose: Any) -> None:
        """Set position and orientation from [x, y, z, qw, qx, qy, qz]."""
        self.set_state_variable(pose, CartesianStateVariable.POSE)

    def set_linear_velocity(self, linear_velocity: Any) -> None:
        """Set the linear velocity."""
        self._set(LINEAR_VELOCITY, linear_velocity)

    def set_angular_velocity(self, angular_velocity: Any) -> None:
        """Set the angular velocity."""
        self._set(ANGULAR_VELOCITY, angular_velocity)

    def set_twist(self, twist: Any) -> None:
        """Set both velocities from a 6-vector."""
        self.set_state_variable(twist, CartesianStateVariable.TWIST)

    def set_linear_acceleration(self, linear_acceleration: Any) -> None:
        """Set the linear acceleration."""
        self._set(LINEAR_ACCELERATION, linear_acceleration)

    def set_angular_acceleration(self, angular_acceleration: Any) -> None:
        """Set the angular acceleration."""
        self._set(ANGULAR_ACCELERATION, angular_acceleration)

    def set_acceleration(self, acceleration: Any) -> None:
        """Set both accelerations from a 6-vector."""
        self.set_state_variable(acceleration, CartesianStateVariable.ACCELERATION)

    def set_force(self, force: Any) -> None:
        """Set the force."""
        self._set(FORCE, force)

    def set_torque(self, torque: Any) -> None:
        """Set the torque."""
        self._set(TORQUE, torque)

    def set_wrench(self, wrench: Any) -> None:
        """Set force and torque from a 6-vector."""
        self.set_state_variable(wrench, CartesianStateVariable.WRENCH)

    def get_state_variable(
        self, variable: CartesianStateVariable
    ) -> NDArray[np.float64]:
        """Return the concatenation of the selected blocks."""
        self.assert_not_empty()
        return np.concatenate([self._blocks[block] for block in blocks_of(variable)])

    def set_state_variable(self, values: Any, variable: CartesianStateVariable) -> None:
        """Set the selected blocks from one flat vector."""
        blocks: Tuple[str, ...] = blocks_of(variable)
        expected: int = sum(BLOCK_SIZES[block] for block in blocks)
        vec: NDArray[np.float64] = np.asarray(values, dtype=float).reshape(-1)
        if vec.size != expected:
            raise IncompatibleSizeError(
                f"Input is of incorrect size: expected {expected}, given {vec.size}"
            )
        parsed: Dict[str, NDArray[np.float64]] = {}
        offset: int = 0
        for block in blocks:
            size: int = BLOCK_SIZES[block]
            chunk: NDArray[np.float64] = vec[offset : offset + size]
            parsed[block] = _block_values(chunk, block)
            offset += size
        self._blocks.update(parsed)
        self.set_filled()

    def data(self) -> NDArray[np.float64]:
        """Return all 25 state variables."""
        return self.get_state_variable(CartesianStateVariable.ALL)

    def set_data(self, data: Any) -> None:
        """Set all 25 state variables."""
        self.set_state_variable(data, CartesianStateVariable.ALL)

    def to_list(self) -> List[float]:
        """Return data() as a list of floats."""
        return [float(value) for value in self.data()]

    def _assert_operand(self, other: Any) -> CartesianState:
        """Check emptiness of both operands, then return other typed."""
        self.assert_not_empty()
        operand: CartesianState = cast_state(other, CartesianState)
        operand.assert_not_empty()
        return operand

    def _assert_same_frame(self, other: CartesianState) -> None:
        if self.get_reference_frame() != other.get_reference_frame():
            raise IncompatibleReferenceFramesError(
                f"Expected {self.get_name()} and {other.get_name()} in the same "
                f"frame, got {self.get_reference_frame()} and "
                f"{other.get_reference_frame()}"
            )

    def _result_for(self, other: CartesianState) -> CartesianState:
        """Return a copy of self typed for a binary operation with other."""
        if type(self) is type(other):
            return self.copy()
        return CartesianState.from_state(self)

    def _aligned_orientation(self, other: CartesianState) -> Quaternion:
        """Return other's orientation in the hemisphere of this one."""
        q_self: Quaternion = Quaternion(self._blocks[ORIENTATION])
        q_other: Quaternion = Quaternion(other._blocks[ORIENTATION])
        if q_self.dot(q_other) > 0.0:
            return q_other
        return q_other.negated()

    def compose(self, other: _CartesianT) -> _CartesianT:
        """Express other, given in this state's frame, in this state's reference.

        Requires this state's name to be other's reference frame. The result
        is named after other, expressed in this state's reference frame and
        projected onto other's specialization.
        """
        operand: CartesianState = self._assert_operand(other)
        if self.get_name() != operand.get_reference_frame():
            raise IncompatibleReferenceFramesError(
                f"Expected {operand.get_name()} to be expressed in "
                f"{self.get_name()}, got {operand.get_reference_frame()}"
            )

        q: Quaternion = Quaternion(self._blocks[ORIENTATION])
        R: NDArray[np.float64] = q.as_matrix()
        p: NDArray[np.float64] = self._blocks[POSITION]
        v: NDArray[np.float64] = self._blocks[LINEAR_VELOCITY]
        w: NDArray[np.float64] = self._blocks[ANGULAR_VELOCITY]
        a: NDArray[np.float64] = self._blocks[LINEAR_ACCELERATION]
        dw: NDArray[np.float64] = self._blocks[ANGULAR_ACCELERATION]
        F: NDArray[np.float64] = self._blocks[FORCE]
        T: NDArray[np.float64] = self._blocks[TORQUE]

        # Quantities of the operand rotated into the reference frame
        Rp: NDArray[np.float64] = R @ operand._blocks[POSITION]
        Rv: NDArray[np.float64] = R @ operand._blocks[LINEAR_VELOCITY]
        Rw: NDArray[np.float64] = R @ operand._blocks[ANGULAR_VELOCITY]
        Ra: NDArray[np.float64] = R @ operand._blocks[LINEAR_ACCELERATION]
        Rdw: NDArray[np.float64] = R @ operand._blocks[ANGULAR_ACCELERATION]
        RF: NDArray[np.float64] = R @ operand._blocks[FORCE]
        RT: NDArray[np.float64] = R @ operand._blocks[TORQUE]

        result: CartesianState = CartesianState(
            operand.get_name(), self.get_reference_frame()
        )
        result._blocks[POSITION] = p + Rp
        orientation: Quaternion = q * self._aligned_orientation(operand)
        result._blocks[ORIENTATION] = orientation.normalized().to_wxyz()
        result._blocks[LINEAR_VELOCITY] = v + Rv + np.cross(w, Rp)
        result._blocks[ANGULAR_VELOCITY] = w + Rw
        result._blocks[LINEAR_ACCELERATION] = (
            a
            + Ra
            + np.cross(dw, Rp)
            + 2.0 * np.cross(w, Rv)
            + np.cross(w, np.cross(w, Rp))
        )
        result._blocks[ANGULAR_ACCELERATION] = dw + Rdw + np.cross(w, Rw)
        result._blocks[FORCE] = F + RF
        result._blocks[TORQUE] = T + RT - np.cross(Rp, F)
        result.set_filled()
        return type(operand).from_state(result)

    def inverse(self: _CartesianT) -> _CartesianT:
        """Return the state of the reference frame expressed in this frame.

        Name and reference frame are swapped, so that composing a state with
        its inverse yields the identity with zero derivatives and wrench.
        """
        self.assert_not_empty()
        q_inv: Quaternion = Quaternion(self._blocks[ORIENTATION]).conjugate()
        Rt: NDArray[np.float64] = q_inv.as_matrix()
        p: NDArray[np.float64] = self._blocks[POSITION]
        v: NDArray[np.float64] = self._blocks[LINEAR_VELOCITY]
        w: NDArray[np.float64] = self._blocks[ANGULAR_VELOCITY]
        a: NDArray[np.float64] = self._blocks[LINEAR_ACCELERATION]
        dw: NDArray[np.float64] = self._blocks[ANGULAR_ACCELERATION]
        F: NDArray[np.float64] = self._blocks[FORCE]
        T: NDArray[np.float64] = self._blocks[TORQUE]

        result: _CartesianT = self.copy()
        result.set_name(self.get_reference_frame())
        result.set_reference_frame(self.get_name())
        result._blocks[POSITION] = -(Rt @ p)
        result._blocks[ORIENTATION] = q_inv.to_wxyz()
        result._blocks[LINEAR_VELOCITY] = Rt @ (np.cross(w, p) - v)
        result._blocks[ANGULAR_VELOCITY] = -(Rt @ w)
        result._blocks[LINEAR_ACCELERATION] = Rt @ (
            np.cross(dw, p) + 2.0 * np.cross(w, v) - np.cross(w, np.cross(w, p)) - a
        )
        result._blocks[ANGULAR_ACCELERATION] = -(Rt @ dw)
        result._blocks[FORCE] = -(Rt @ F)
        result._blocks[TORQUE] = -(Rt @ (T + np.cross(p, F)))
        result.set_filled()
        return result

    def add(self, other: CartesianState) -> CartesianState:
        """Add two states expressed in the same reference frame.

        Orientations are combined with the Hamilton product, every other
        block is summed.
        """
        operand: CartesianState = self._assert_operand(other)
        self._assert_same_frame(operand)
        result: CartesianState = self._result_for(operand)
        q: Quaternion = Quaternion(self._blocks[ORIENTATION])
        for block in BLOCK_SIZES:
            if block == ORIENTATION:
                continue
            result._blocks[block] = self._blocks[block] + operand._blocks[block]
        orientation: Quaternion = q * self._aligned_orientation(operand)
        result._blocks[ORIENTATION] = orientation.normalized().to_wxyz()
        result.set_filled()
        return result

    def subtract(self, other: CartesianState) -> CartesianState:
        """Subtract a state expressed in the same reference frame."""
        operand: CartesianState = self._assert_operand(other)
        self._assert_same_frame(operand)
        result: CartesianState = self._result_for(operand)
        q: Quaternion = Quaternion(self._blocks[ORIENTATION])
        for block in BLOCK_SIZES:
            if block == ORIENTATION:
                continue
            result._blocks[block] = self._blocks[block] - operand._blocks[block]
        q_diff: Quaternion = q * self._aligned_orientation(operand).conjugate()
        result._blocks[ORIENTATION] = q_diff.normalized().to_wxyz()
        result.set_filled()
        return result

    def negated(self: _CartesianT) -> _CartesianT:
        """Return the state with every block negated and orientation conjugated."""
        self.assert_not_empty()
        result: _CartesianT = self.copy()
        for block in BLOCK_SIZES:
            if block == ORIENTATION:
                result._blocks[block] = (
                    Quaternion(self._blocks[block]).conjugate().to_wxyz()
                )
            else:
                result._blocks[block] = -self._blocks[block]
        result.set_filled()
        return result

    def scale(self: _CartesianT, factor: float) -> _CartesianT:
        """Scale every block, the orientation along its geodesic from identity."""
        self.assert_not_empty()
        lam: float = float(factor)
        result: _CartesianT = self.copy()
        for block in BLOCK_SIZES:
            if block == ORIENTATION:
                log_q: Quaternion = Quaternion(self._blocks[block]).log()
                result._blocks[block] = log_q.exp(lam).to_wxyz()
            else:
                result._blocks[block] = lam * self._blocks[block]
        result.set_filled()
        return result

    def normalized(
        self: _CartesianT,
        variable: CartesianStateVariable = CartesianStateVariable.ALL,
    ) -> _CartesianT:
        """Return a copy with each selected block scaled to unit norm."""
        self.assert_not_empty()
        result: _CartesianT = self.copy()
        for block in blocks_of(variable):
            result._blocks[block] = Linalg.normalized(self._blocks[block])
        return result

    def norms(
        self, variable: CartesianStateVariable = CartesianStateVariable.ALL
    ) -> List[float]:
        """Return the norm of each selected block, in storage order."""
        self.assert_not_empty()
        return [
            float(np.linalg.norm(self._blocks[block])) for block in blocks_of(variable)
        ]

    def dist(
        self,
        other: CartesianState,
        variable: CartesianStateVariable = CartesianStateVariable.ALL,
    ) -> float:
        """Return the summed block distances to a state in the same frame.

        Orientation contributes the rotation angle between the quaternions,
        every other block the norm of the difference.
        """
        operand: CartesianState = self._assert_operand(other)
        self._assert_same_frame(operand)
        result: float = 0.0
        for block in blocks_of(variable):
            if block == ORIENTATION:
                q_self: Quaternion = Quaternion(self._blocks[block])
                result += q_self.angular_distance(Quaternion(operand._blocks[block]))
            else:
                diff: NDArray[np.float64] = self._blocks[block] - operand._blocks[block]
                result += float(np.linalg.norm(diff))
        return result

    def clamp_state_variable(
        self,
        max_value: float,
        variable: CartesianStateVariable,
        noise_ratio: float = 0.0,
    ) -> None:
        """Apply a dead zone, then saturate the norm of the selected blocks.

        The selection is zeroed when its norm is below noise_ratio * max_value
        (and noise_ratio is non-zero), rescaled to max_value when its norm
        exceeds it, and left untouched otherwise.
        """
        if variable in (
            CartesianStateVariable.ORIENTATION,
            CartesianStateVariable.POSE,
            CartesianStateVariable.ALL,
        ):
            raise StateNotImplementedError(
                f"clamp_state_variable is not implemented for {variable.value}"
            )
        values: NDArray[np.float64] = self.get_state_variable(variable)
        norm: float = float(np.linalg.norm(values))
        if noise_ratio != 0.0 and norm < noise_ratio * max_value:
            values = np.zeros_like(values)
        elif norm > max_value:
            values = max_value * values / norm
        self.set_state_variable(values, variable)

    def _mul_array(self, array: NDArray[np.float64]) -> Any:
        return NotImplemented

    def _mul_timedelta(self, dt: timedelta) -> Any:
        return NotImplemented

    def _div_timedelta(self, dt: timedelta) -> Any:
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        if isinstance(other, State):
            return self.compose(other)  # type: ignore[arg-type]
        if isinstance(other, timedelta):
            return self._mul_timedelta(other)
        if isinstance(other, numbers.Real):
            return self.scale(float(other))
        if isinstance(other, (np.ndarray, list, tuple)):
            return self._mul_array(np.asarray(other, dtype=float))
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            return self._mul_timedelta(other)
        if isinstance(other, numbers.Real):
            return self.scale(float(other))
        if isinstance(other, np.ndarray) and other.ndim == 2:
            return self._mul_array(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        if isinstance(other, timedelta):
            return self._div_timedelta(other)
        if isinstance(other, numbers.Real):
            return self.scale(1.0 / float(other))
        return NotImplemented

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, State):
            return NotImplemented
        return self.add(other)  # type: ignore[arg-type]

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, State):
            return NotImplemented
        return self.subtract(other)  # type: ignore[arg-type]

    def __neg__(self: _CartesianT) -> _CartesianT:
        return self.negated()

    def _header(self) -> str:
        prefix: str = "Empty " if self.is_empty() else ""
        return (
            f"{prefix}{type(self).__name__}: {self.get_name()} expressed in "
            f"{self.get_reference_frame()} frame"
        )

    def __str__(self) -> str:
        if self.is_empty():
            return self._header()
        lines: List[str] = [self._header()]
        for block in self._PROJECTED_BLOCKS:
            values: str = ", ".join(f"{value:g}" for value in self._blocks[block])
            label: str = block.replace("_", " ")
            if block == ORIENTATION:
                label = "orientation (w, x, y, z)"
            lines.append(f"{label}: ({values})")
        return "\n".join(lines)
