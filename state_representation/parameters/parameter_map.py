################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Collection of parameters addressed by name."""

from __future__ import annotations

import logging
from typing import Any
from typing import Dict
from typing import Iterable
from typing import List
from typing import Mapping
from typing import Optional
from typing import Union

from state_representation.exceptions import InvalidParameterError
from state_representation.parameters.parameter import Parameter
from state_representation.parameters.parameter import ParameterType
from state_representation.state_type import StateType


_LOG: logging.Logger = logging.getLogger(__name__)


ParameterCollection = Union[Mapping[str, Parameter], Iterable[Parameter]]


class ParameterMap:
    """Parameters keyed by their names."""

    def __init__(self, parameters: Optional[ParameterCollection] = None) -> None:
        self._parameters: Dict[str, Parameter] = {}
        if parameters is not None:
            self.set_parameters(parameters)

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def get_parameter(self, name: str) -> Parameter:
        """Return the parameter with the given name."""
        try:
            return self._parameters[name]
        except KeyError:
            raise InvalidParameterError(
                f"Could not find a parameter named '{name}'"
            ) from None

    def get_parameter_value(self, name: str) -> Any:
        """Return a copy of the value of a parameter."""
        return self.get_parameter(name).get_value()

    def get_parameters(self) -> Dict[str, Parameter]:
        """Return the parameters keyed by name."""
        return dict(self._parameters)

    def get_parameter_list(self) -> List[Parameter]:
        """Return the parameters in insertion order."""
        return list(self._parameters.values())

    def set_parameter(self, parameter: Parameter) -> None:
        """Add a parameter, replacing any parameter with the same name."""
        if not isinstance(parameter, Parameter):
            raise InvalidParameterError(
                f"Expected a Parameter, given {type(parameter).__name__}"
            )
        name: str = parameter.get_name()
        if name in self._parameters:
            _LOG.debug("Replacing parameter %s", name)
        self._parameters[name] = parameter

    def set_parameters(self, parameters: ParameterCollection) -> None:
        """Add parameters from a list or a mapping of name to parameter."""
        items: List[Parameter]
        if isinstance(parameters, Mapping):
            for name, parameter in parameters.items():
                if not isinstance(parameter, Parameter) or parameter.get_name() != name:
                    raise InvalidParameterError(
                        f"Entry {name} of the mapping is not a parameter named {name}"
                    )
            items = list(parameters.values())
        else:
            items = list(parameters)
            for parameter in items:
                if not isinstance(parameter, Parameter):
                    raise InvalidParameterError(
                        f"Expected a Parameter, given {type(parameter).__name__}"
                    )
        for parameter in items:
            self.set_parameter(parameter)

    def set_parameter_value(
        self,
        name: str,
        value: Any,
        parameter_type: Optional[ParameterType] = None,
        parameter_state_type: Optional[StateType] = None,
    ) -> None:
        """Store value under name, keeping the existing parameter type if unset."""
        if parameter_type is None and name in self._parameters:
            existing: Parameter = self._parameters[name]
            parameter_type = existing.get_parameter_type()
            if parameter_state_type is None:
                parameter_state_type = existing.get_parameter_state_type()
        self.set_parameter(
            Parameter(name, value, parameter_type, parameter_state_type)
        )

    def remove_parameter(self, name: str) -> None:
        """Remove a parameter by name."""
        if name not in self._parameters:
            raise InvalidParameterError(f"Could not find a parameter named '{name}'")
        del self._parameters[name]

    def __len__(self) -> int:
        return len(self._parameters)

    def __contains__(self, name: object) -> bool:
        return name in self._parameters
