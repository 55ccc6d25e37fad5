################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Library defaults and validated clamping configuration."""

from __future__ import annotations

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import replace
from typing import TYPE_CHECKING
from typing import Any
from typing import TypeVar


if TYPE_CHECKING:
    from state_representation.parameters.parameter_map import ParameterMap


# Reference frame assigned to spatial states when none is given
DEFAULT_REFERENCE_FRAME: str = "world"

# Lower bound of the uniform distribution used by random factories
RANDOM_LOW: float = -1.0
# Upper bound of the uniform distribution used by random factories
RANDOM_HIGH: float = 1.0

# Maximum linear magnitude, in the units of the clamped block
CLAMP_MAX_LINEAR: float = 1.0
# Maximum angular magnitude, in the units of the clamped block
CLAMP_MAX_ANGULAR: float = 1.0
# Dead zone as a fraction of CLAMP_MAX_LINEAR (0 disables it)
CLAMP_LINEAR_NOISE_RATIO: float = 0.0
# Dead zone as a fraction of CLAMP_MAX_ANGULAR (0 disables it)
CLAMP_ANGULAR_NOISE_RATIO: float = 0.0

_ClampableT = TypeVar("_ClampableT")


class StateParamsError(Exception):
    """Raised when state parameter validation fails."""


def _require_non_negative(value: float, name: str) -> None:
    """Require a non-negative value."""
    if value < 0.0:
        raise StateParamsError(f"{name} must be non-negative")


def _require_ratio(value: float, name: str) -> None:
    """Require a value within [0, 1]."""
    if value < 0.0 or value > 1.0:
        raise StateParamsError(f"{name} must be within [0, 1]")


@dataclass(frozen=True)
class ClampParams:
    """Saturation and dead-zone limits for the linear and angular blocks.

    The same limits apply to a twist (velocities), an acceleration or a
    wrench (force and torque), whichever state is handed to clamp().
    """

    # Maximum norm of the linear block
    max_linear: float = CLAMP_MAX_LINEAR
    # Maximum norm of the angular block
    max_angular: float = CLAMP_MAX_ANGULAR
    # Linear dead zone as a fraction of max_linear
    linear_noise_ratio: float = CLAMP_LINEAR_NOISE_RATIO
    # Angular dead zone as a fraction of max_angular
    angular_noise_ratio: float = CLAMP_ANGULAR_NOISE_RATIO

    @classmethod
    def defaults(cls) -> ClampParams:
        """Return the default limits."""
        return cls()

    @classmethod
    def from_parameter_map(
        cls, parameters: ParameterMap, prefix: str = ""
    ) -> ClampParams:
        """Build limits from a parameter map, falling back to defaults.

        Parameter names are the field names, optionally prefixed, for
        example "twist_max_linear" with prefix "twist_".
        """
        values: dict[str, Any] = {}
        for name in asdict(cls()):
            key: str = prefix + name
            if parameters.has_parameter(key):
                values[name] = float(parameters.get_parameter_value(key))
        params: ClampParams = cls(**values)
        params.validate()
        return params

    def validate(self) -> None:
        """Validate parameter invariants."""
        _require_non_negative(self.max_linear, "max_linear")
        _require_non_negative(self.max_angular, "max_angular")
        _require_ratio(self.linear_noise_ratio, "linear_noise_ratio")
        _require_ratio(self.angular_noise_ratio, "angular_noise_ratio")

    def replace(self, **overrides: Any) -> ClampParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_dict(self) -> dict[str, float]:
        """Return a plain dict representation."""
        return asdict(self)

    def clamp(self, state: _ClampableT) -> _ClampableT:
        """Return a clamped copy of a twist, acceleration or wrench."""
        self.validate()
        return state.clamped(  # type: ignore[attr-defined]
            self.max_linear,
            self.max_angular,
            self.linear_noise_ratio,
            self.angular_noise_ratio,
        )
