################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""States expressed in a named reference frame."""

from __future__ import annotations

from typing import cast

from state_representation.config.state_params import DEFAULT_REFERENCE_FRAME
from state_representation.exceptions import InvalidCastError
from state_representation.state import State
from state_representation.state_type import StateType


class SpatialState(State):
    """State tagged with the reference frame it is expressed in."""

    def __init__(
        self,
        name: str = "",
        reference_frame: str = DEFAULT_REFERENCE_FRAME,
        state_type: StateType = StateType.SPATIAL_STATE,
    ) -> None:
        super().__init__(name, state_type)
        self._reference_frame: str = reference_frame

    def get_reference_frame(self) -> str:
        """Return the name of the frame the state is expressed in."""
        return self._reference_frame

    def set_reference_frame(self, reference_frame: str) -> None:
        """Set the reference frame name."""
        self._reference_frame = reference_frame

    def is_incompatible(self, other: State) -> bool:
        """Return True when neither state relates to the other's frame.

        Two spatial states are related when this state is the parent of the
        other (this name is the other's frame), its child (this frame is the
        other's name) or its sibling (both share a frame).
        """
        if not other.get_type().is_spatial():
            raise InvalidCastError(
                f"Could not cast {other.get_name()} of type "
                f"{other.get_type().value} to a SpatialState"
            )
        spatial: SpatialState = cast(SpatialState, other)
        return (
            self.get_name() != spatial._reference_frame
            and self._reference_frame != spatial.get_name()
            and self._reference_frame != spatial._reference_frame
        )

    def is_compatible(self, other: State) -> bool:
        """Return True for spatial states of the same type in related frames."""
        if self.get_type() != other.get_type():
            return False
        return not self.is_incompatible(other)

    def __str__(self) -> str:
        prefix: str = "Empty " if self.is_empty() else ""
        return (
            f"{prefix}SpatialState: {self.get_name()} expressed in "
            f"{self._reference_frame} frame"
        )
