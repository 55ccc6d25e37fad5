################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Library defaults and clamping configuration."""

from state_representation.config.state_params import ClampParams
from state_representation.config.state_params import StateParamsError


__all__ = ["ClampParams", "StateParamsError"]
