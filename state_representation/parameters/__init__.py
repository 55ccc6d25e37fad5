################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Named configuration values and their containers."""

from state_representation.parameters.parameter import Parameter
from state_representation.parameters.parameter import ParameterType
from state_representation.parameters.parameter_map import ParameterMap


__all__ = ["Parameter", "ParameterMap", "ParameterType"]
