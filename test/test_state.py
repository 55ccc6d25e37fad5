################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Tests for the State base class."""

from __future__ import annotations

import time

import pytest

from state_representation.exceptions import EmptyStateError
from state_representation.exceptions import InvalidCastError
from state_representation.exceptions import StateNotImplementedError
from state_representation.space.joint.joint_state import JointState
from state_representation.state import State
from state_representation.state import cast_state
from state_representation.state_type import StateType


def test_new_state_is_empty() -> None:
    """Checks a fresh state is empty until filled."""
    state: State = State("robot")
    assert state.is_empty()
    assert not state
    assert str(state) == "Empty State: robot"

    state.set_filled()
    assert not state.is_empty()
    assert state
    assert str(state) == "State: robot"


def test_assert_not_empty_names_state() -> None:
    """Checks the empty-state error names the state."""
    state: State = State("robot")
    with pytest.raises(EmptyStateError, match="robot state is empty"):
        state.assert_not_empty()


def test_age_and_deprecation() -> None:
    """Checks the age grows from the last modification."""
    state: State = State("robot")
    state.set_filled()
    time.sleep(0.01)
    assert state.get_age() >= 0.01
    assert state.is_deprecated(0.005)
    assert not state.is_deprecated(60.0)

    state.reset_timestamp()
    assert state.get_age() < 0.01


def test_copy_preserves_timestamp() -> None:
    """Checks copies keep the timestamp of the original."""
    state: State = State("robot")
    state.set_filled()
    duplicate: State = state.copy()
    assert duplicate.get_timestamp() == state.get_timestamp()
    assert duplicate is not state


def test_compatibility_compares_type_and_name() -> None:
    """Checks base compatibility."""
    state: State = State("a")
    assert state.is_compatible(State("a"))
    assert state.is_incompatible(State("b"))
    assert state.is_incompatible(JointState("a", 1))
    assert JointState("a", 1).get_type() == StateType.JOINT_STATE


def test_data_is_not_implemented_on_base() -> None:
    """Checks the base class has no data layout."""
    state: State = State("robot")
    with pytest.raises(StateNotImplementedError):
        state.data()
    with pytest.raises(NotImplementedError):
        state.set_data([1.0])


def test_cast_state() -> None:
    """Checks typed access fails cleanly on the wrong kind."""
    joint_state: JointState = JointState("arm", 2)
    assert cast_state(joint_state, State) is joint_state
    with pytest.raises(InvalidCastError):
        cast_state(State("robot"), JointState)
