################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for clamping configuration."""

from __future__ import annotations

import numpy as np
import pytest

from state_representation.config.state_params import ClampParams
from state_representation.config.state_params import StateParamsError
from state_representation.parameters.parameter import Parameter
from state_representation.parameters.parameter_map import ParameterMap
from state_representation.space.cartesian.cartesian_twist import CartesianTwist


def test_defaults() -> None:
    """Checks the default limits are valid."""
    params: ClampParams = ClampParams.defaults()
    params.validate()
    assert params.as_dict() == {
        "max_linear": 1.0,
        "max_angular": 1.0,
        "linear_noise_ratio": 0.0,
        "angular_noise_ratio": 0.0,
    }


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_linear": -1.0},
        {"max_angular": -0.1},
        {"linear_noise_ratio": 1.5},
        {"angular_noise_ratio": -0.5},
    ],
)
def test_validate_rejects(overrides: dict[str, float]) -> None:
    """Checks invalid limits are rejected."""
    with pytest.raises(StateParamsError):
        ClampParams.defaults().replace(**overrides).validate()


def test_from_parameter_map() -> None:
    """Checks prefixed parameters override defaults."""
    parameters: ParameterMap = ParameterMap(
        [
            Parameter("twist_max_linear", 0.5),
            Parameter("twist_angular_noise_ratio", 0.1),
            Parameter("max_angular", 3.0),
        ]
    )
    params: ClampParams = ClampParams.from_parameter_map(parameters, prefix="twist_")
    assert params.max_linear == 0.5
    assert params.angular_noise_ratio == 0.1
    assert params.max_angular == 1.0

    parameters.set_parameter(Parameter("twist_max_linear", -2.0))
    with pytest.raises(StateParamsError):
        ClampParams.from_parameter_map(parameters, prefix="twist_")


def test_clamp_twist() -> None:
    """Checks a twist is clamped with the configured limits."""
    twist: CartesianTwist = CartesianTwist(
        "tool", linear_velocity=[3.0, 4.0, 0.0], angular_velocity=[0.0, 0.0, 0.05]
    )
    params: ClampParams = ClampParams(max_linear=1.0, max_angular=1.0).replace(
        angular_noise_ratio=0.1
    )
    clamped: CartesianTwist = params.clamp(twist)
    assert isinstance(clamped, CartesianTwist)
    assert np.allclose(clamped.get_linear_velocity(), [0.6, 0.8, 0.0])
    assert np.allclose(clamped.get_angular_velocity(), np.zeros(3))
    assert np.allclose(twist.get_linear_velocity(), [3.0, 4.0, 0.0])
