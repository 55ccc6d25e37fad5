################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Base class of every state: identity, emptiness and staleness."""

from __future__ import annotations

import copy
import time
from typing import Any
from typing import Type
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from state_representation.exceptions import EmptyStateError
from state_representation.exceptions import InvalidCastError
from state_representation.exceptions import StateNotImplementedError
from state_representation.state_type import StateType


# Nanoseconds per second for age conversions
_NS_PER_S: float = 1e9

_StateT = TypeVar("_StateT", bound="State")


class State:
    """Named state with a type tag, an emptiness flag and a timestamp.

    A state is empty from construction until a setter writes real data into
    it. The timestamp is a monotonic instant refreshed by every write, so
    get_age() measures time since the last modification. copy() preserves
    the timestamp of the original.
    """

    # Let numpy defer binary operators such as ``gain * state`` to us
    __array_ufunc__ = None

    def __init__(self, name: str = "", state_type: StateType = StateType.STATE) -> None:
        self._type: StateType = state_type
        self._name: str = name
        self._empty: bool = True
        self._timestamp_ns: int = time.monotonic_ns()

    def get_type(self) -> StateType:
        """Return the type tag."""
        return self._type

    def get_name(self) -> str:
        """Return the state name."""
        return self._name

    def set_name(self, name: str) -> None:
        """Set the state name."""
        self._name = name

    def is_empty(self) -> bool:
        """Return True until data has been written to the state."""
        return self._empty

    def set_empty(self, empty: bool = True) -> None:
        """Set the emptiness flag."""
        self._empty = empty

    def set_filled(self) -> None:
        """Mark the state as holding data and refresh its timestamp."""
        self._empty = False
        self.reset_timestamp()

    def get_timestamp(self) -> int:
        """Return the monotonic timestamp in nanoseconds."""
        return self._timestamp_ns

    def reset_timestamp(self) -> None:
        """Set the timestamp to now."""
        self._timestamp_ns = time.monotonic_ns()

    def get_age(self) -> float:
        """Return the seconds elapsed since the timestamp."""
        return (time.monotonic_ns() - self._timestamp_ns) / _NS_PER_S

    def is_deprecated(self, time_delay: float) -> bool:
        """Return True when the state is at least time_delay seconds old."""
        return self.get_age() >= time_delay

    def initialize(self) -> None:
        """Reset the state to its empty default."""
        self._empty = True

    def is_compatible(self, other: State) -> bool:
        """Return True when other has the same type tag and name."""
        return self._type == other._type and self._name == other._name

    def is_incompatible(self, other: State) -> bool:
        """Return True when other must not be combined with this state."""
        return not self.is_compatible(other)

    def data(self) -> NDArray[np.float64]:
        """Return the state as a flat vector."""
        raise StateNotImplementedError(
            f"data() is not implemented for {type(self).__name__}"
        )

    def set_data(self, data: Any) -> None:
        """Set the state from a flat vector."""
        raise StateNotImplementedError(
            f"set_data() is not implemented for {type(self).__name__}"
        )

    def copy(self: _StateT) -> _StateT:
        """Return an independent copy, timestamp included."""
        return copy.deepcopy(self)

    def assert_not_empty(self) -> None:
        """Raise EmptyStateError when the state holds no data."""
        if self._empty:
            raise EmptyStateError(f"{self._name} state is empty")

    def __bool__(self) -> bool:
        return not self._empty

    def __str__(self) -> str:
        prefix: str = "Empty " if self._empty else ""
        return f"{prefix}State: {self._name}"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


def cast_state(state: State, cls: Type[_StateT]) -> _StateT:
    """Return state typed as cls, or raise InvalidCastError."""
    if not isinstance(state, cls):
        raise InvalidCastError(
            f"Could not cast {state.get_name()} of type "
            f"{state.get_type().value} to {cls.__name__}"
        )
    return state
