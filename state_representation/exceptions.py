################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Errors raised by state representation operations."""

from __future__ import annotations


class StateRepresentationError(Exception):
    """Base class for all state representation errors."""


class EmptyStateError(StateRepresentationError):
    """Raised when an operation reads from a state that was never filled."""


class IncompatibleStatesError(StateRepresentationError):
    """Raised when two states cannot be combined."""


class IncompatibleReferenceFramesError(IncompatibleStatesError):
    """Raised when two spatial states are expressed in unrelated frames."""


class IncompatibleSizeError(StateRepresentationError):
    """Raised when an array argument has the wrong dimensions."""


class JointNotFoundError(StateRepresentationError):
    """Raised when a joint name or index lookup fails."""


class InvalidCastError(StateRepresentationError):
    """Raised when a state is not of the kind required by an operation."""


class StateNotImplementedError(StateRepresentationError, NotImplementedError):
    """Raised when an operation has no implementation for the state kind."""


class InvalidParameterError(StateRepresentationError):
    """Raised when a parameter is missing or holds a value of the wrong kind."""
