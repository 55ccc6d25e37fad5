################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Shapes built on a Cartesian center pose."""

from state_representation.geometry.shape import Shape
from state_representation.geometry.ellipsoid import Ellipsoid


__all__ = ["Ellipsoid", "Shape"]
