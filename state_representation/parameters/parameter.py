################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Named, type-tagged configuration values."""

from __future__ import annotations

import copy
import numbers
from enum import Enum
from typing import Any
from typing import Callable
from typing import Dict
from typing import Optional

import numpy as np

from state_representation.exceptions import InvalidParameterError
from state_representation.state import State
from state_representation.state_type import StateType


class ParameterType(Enum):
    """Kind of value held by a parameter."""

    INT = "int"
    INT_ARRAY = "int_array"
    DOUBLE = "double"
    DOUBLE_ARRAY = "double_array"
    BOOL = "bool"
    BOOL_ARRAY = "bool_array"
    STRING = "string"
    STRING_ARRAY = "string_array"
    STATE = "state"
    VECTOR = "vector"
    MATRIX = "matrix"


def _is_int(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_double(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_array_of(check: Callable[[Any], bool]) -> Callable[[Any], bool]:
    def _check(value: Any) -> bool:
        if isinstance(value, (str, bytes)):
            return False
        try:
            return all(check(item) for item in value)
        except TypeError:
            return False

    return _check


def _as_array(ndim: int) -> Callable[[Any], bool]:
    def _check(value: Any) -> bool:
        try:
            array: np.ndarray = np.asarray(value, dtype=float)
        except (TypeError, ValueError):
            return False
        return array.ndim == ndim and bool(np.all(np.isfinite(array)))

    return _check


_VALIDATORS: Dict[ParameterType, Callable[[Any], bool]] = {
    ParameterType.INT: _is_int,
    ParameterType.INT_ARRAY: _is_array_of(_is_int),
    ParameterType.DOUBLE: _is_double,
    ParameterType.DOUBLE_ARRAY: _is_array_of(_is_double),
    ParameterType.BOOL: _is_bool,
    ParameterType.BOOL_ARRAY: _is_array_of(_is_bool),
    ParameterType.STRING: _is_string,
    ParameterType.STRING_ARRAY: _is_array_of(_is_string),
    ParameterType.STATE: lambda value: isinstance(value, State),
    ParameterType.VECTOR: _as_array(1),
    ParameterType.MATRIX: _as_array(2),
}


def _normalize(value: Any, parameter_type: ParameterType) -> Any:
    """Return an owned copy of value in the storage form of its type."""
    if parameter_type == ParameterType.INT:
        return int(value)
    if parameter_type == ParameterType.DOUBLE:
        return float(value)
    if parameter_type == ParameterType.BOOL:
        return bool(value)
    if parameter_type == ParameterType.INT_ARRAY:
        return [int(item) for item in value]
    if parameter_type == ParameterType.DOUBLE_ARRAY:
        return [float(item) for item in value]
    if parameter_type == ParameterType.BOOL_ARRAY:
        return [bool(item) for item in value]
    if parameter_type == ParameterType.STRING_ARRAY:
        return list(value)
    if parameter_type in (ParameterType.VECTOR, ParameterType.MATRIX):
        return np.array(value, dtype=float)
    if parameter_type == ParameterType.STATE:
        return copy.deepcopy(value)
    return value


def infer_parameter_type(value: Any) -> ParameterType:
    """Return the parameter type matching a Python value."""
    if isinstance(value, State):
        return ParameterType.STATE
    if _is_bool(value):
        return ParameterType.BOOL
    if _is_int(value):
        return ParameterType.INT
    if _is_double(value):
        return ParameterType.DOUBLE
    if _is_string(value):
        return ParameterType.STRING
    if isinstance(value, np.ndarray):
        if value.ndim == 1:
            return ParameterType.VECTOR
        if value.ndim == 2:
            return ParameterType.MATRIX
    elif isinstance(value, (list, tuple)) and value:
        for parameter_type in (
            ParameterType.BOOL_ARRAY,
            ParameterType.INT_ARRAY,
            ParameterType.DOUBLE_ARRAY,
            ParameterType.STRING_ARRAY,
        ):
            if _VALIDATORS[parameter_type](value):
                return parameter_type
    raise InvalidParameterError(
        f"Could not infer a parameter type for value of type {type(value).__name__}"
    )


class Parameter(State):
    """Configuration value with a name and a parameter type.

    A parameter is empty until it holds a value. State values also carry the
    StateType they must have; they are copied on every read and write.
    """

    def __init__(
        self,
        name: str,
        value: Any = None,
        parameter_type: Optional[ParameterType] = None,
        parameter_state_type: Optional[StateType] = None,
    ) -> None:
        super().__init__(name, StateType.PARAMETER)
        if parameter_type is None:
            if value is None:
                raise InvalidParameterError(
                    f"Parameter {name} needs a value or a parameter type"
                )
            parameter_type = infer_parameter_type(value)
        if parameter_state_type is not None and parameter_type != ParameterType.STATE:
            raise InvalidParameterError(
                f"Parameter {name} of type {parameter_type.value} cannot have a "
                f"state type"
            )
        self._parameter_type: ParameterType = parameter_type
        self._parameter_state_type: Optional[StateType] = parameter_state_type
        self._value: Any = None
        if value is not None:
            self.set_value(value)

    def get_parameter_type(self) -> ParameterType:
        return self._parameter_type

    def get_parameter_state_type(self) -> Optional[StateType]:
        return self._parameter_state_type

    def get_value(self) -> Any:
        """Return a copy of the value."""
        self.assert_not_empty()
        return _normalize(self._value, self._parameter_type)

    def set_value(self, value: Any) -> None:
        """Validate and store a copy of value."""
        if not _VALIDATORS[self._parameter_type](value):
            raise InvalidParameterError(
                f"Value of type {type(value).__name__} is not valid for parameter "
                f"{self.get_name()} of type {self._parameter_type.value}"
            )
        if self._parameter_type == ParameterType.STATE:
            state_type: StateType = value.get_type()
            if self._parameter_state_type is None:
                self._parameter_state_type = state_type
            elif state_type != self._parameter_state_type:
                raise InvalidParameterError(
                    f"Parameter {self.get_name()} expects a state of type "
                    f"{self._parameter_state_type.value}, given {state_type.value}"
                )
        self._value = _normalize(value, self._parameter_type)
        self.set_filled()

    def __str__(self) -> str:
        if self.is_empty():
            return f"Parameter '{self.get_name()}' is empty"
        kind: str = self._parameter_type.value
        if self._parameter_state_type is not None:
            kind = f"{kind} ({self._parameter_state_type.value})"
        value: Any = self._value
        if isinstance(value, np.ndarray):
            text: str = np.array2string(value, precision=6)
        else:
            text = str(value)
        return f"Parameter '{self.get_name()}' of type {kind}: {text}"
