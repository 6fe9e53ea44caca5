"""Central numerical tolerances and small geometry constants.

Every tolerant comparison in curvekit defaults to ``EPS_DEFAULT``. Keeping the
literal here lets callers tune one value (or pass ``tol=`` explicitly) rather
than hunting for scattered thresholds.
"""
from __future__ import annotations

import math

# Geometry tolerances
EPS_DEFAULT: float = 1e-5         # default absolute tolerance for scalar comparisons
EPS_DEGENERATE: float = 1e-12     # below this a direction vector has no usable heading

# Angles
FULL_TURN: float = 2.0 * math.pi
HALF_TURN: float = math.pi
QUARTER_TURN: float = math.pi / 2.0

__all__ = [
    'EPS_DEFAULT',
    'EPS_DEGENERATE',
    'FULL_TURN',
    'HALF_TURN',
    'QUARTER_TURN',
]
