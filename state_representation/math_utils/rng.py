################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Shared pseudo-random generator used by the random state factories.

The generator is process-global and not thread-safe. Callers drawing random
states from several threads must serialize access themselves.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np


_LOG: logging.Logger = logging.getLogger(__name__)

_generator: np.random.Generator = np.random.default_rng()


def get_generator() -> np.random.Generator:
    """Return the shared generator."""
    return _generator


def seed(value: Optional[int]) -> None:
    """Reseed the shared generator, or reseed from entropy when value is None."""
    global _generator
    _LOG.debug("Reseeding state generator with %s", value)
    _generator = np.random.default_rng(value)
