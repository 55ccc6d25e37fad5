################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for typed parameters."""

from __future__ import annotations

import numpy as np
import pytest

from state_representation.exceptions import EmptyStateError
from state_representation.exceptions import InvalidParameterError
from state_representation.parameters.parameter import Parameter
from state_representation.parameters.parameter import ParameterType
from state_representation.parameters.parameter import infer_parameter_type
from state_representation.space.cartesian.cartesian_pose import CartesianPose
from state_representation.space.cartesian.cartesian_twist import CartesianTwist
from state_representation.state_type import StateType


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, ParameterType.BOOL),
        (3, ParameterType.INT),
        (2.5, ParameterType.DOUBLE),
        ("base", ParameterType.STRING),
        ([True, False], ParameterType.BOOL_ARRAY),
        ([1, 2], ParameterType.INT_ARRAY),
        ([1, 2.5], ParameterType.DOUBLE_ARRAY),
        (["a", "b"], ParameterType.STRING_ARRAY),
        (np.zeros(3), ParameterType.VECTOR),
        (np.eye(2), ParameterType.MATRIX),
    ],
)
def test_infer_parameter_type(value: object, expected: ParameterType) -> None:
    """Checks the type inferred from a value."""
    assert infer_parameter_type(value) == expected


def test_infer_rejects_unknown_values() -> None:
    """Checks values without a parameter type."""
    with pytest.raises(InvalidParameterError):
        infer_parameter_type([])
    with pytest.raises(InvalidParameterError):
        infer_parameter_type({"a": 1})


def test_parameter_value() -> None:
    """Checks a parameter holds its value."""
    parameter: Parameter = Parameter("gain", 2.0)
    assert parameter.get_type() == StateType.PARAMETER
    assert parameter.get_parameter_type() == ParameterType.DOUBLE
    assert parameter.get_parameter_state_type() is None
    assert not parameter.is_empty()
    assert parameter.get_value() == 2.0
    assert str(parameter) == "Parameter 'gain' of type double: 2.0"

    parameter.set_value(3)
    assert parameter.get_value() == 3.0
    assert isinstance(parameter.get_value(), float)
    with pytest.raises(InvalidParameterError):
        parameter.set_value("fast")


def test_empty_parameter() -> None:
    """Checks a parameter declared without a value."""
    parameter: Parameter = Parameter("gain", parameter_type=ParameterType.DOUBLE)
    assert parameter.is_empty()
    assert str(parameter) == "Parameter 'gain' is empty"
    with pytest.raises(EmptyStateError):
        parameter.get_value()
    with pytest.raises(InvalidParameterError):
        Parameter("gain")
    with pytest.raises(InvalidParameterError):
        Parameter("gain", 1.0, ParameterType.DOUBLE, StateType.CARTESIAN_POSE)


def test_vector_values_are_copied() -> None:
    """Checks array values do not alias the caller's data."""
    values: np.ndarray = np.array([1.0, 2.0])
    parameter: Parameter = Parameter("limits", values)
    values[0] = 5.0
    assert np.allclose(parameter.get_value(), [1.0, 2.0])

    read: np.ndarray = parameter.get_value()
    read[1] = 7.0
    assert np.allclose(parameter.get_value(), [1.0, 2.0])

    with pytest.raises(InvalidParameterError):
        parameter.set_value(np.eye(2))


def test_state_parameter() -> None:
    """Checks state values keep their state type."""
    pose: CartesianPose = CartesianPose("target", position=[1.0, 2.0, 3.0])
    parameter: Parameter = Parameter("target", pose)
    assert parameter.get_parameter_type() == ParameterType.STATE
    assert parameter.get_parameter_state_type() == StateType.CARTESIAN_POSE

    value: CartesianPose = parameter.get_value()
    assert value is not pose
    assert np.allclose(value.get_position(), [1.0, 2.0, 3.0])

    with pytest.raises(InvalidParameterError):
        parameter.set_value(CartesianTwist.zero("target"))
    with pytest.raises(InvalidParameterError):
        parameter.set_value(2.0)
