"""Counters collected by the corner-rounding engine.

Pass a RoundingStats instance to ``rounded_corners`` / ``bezier_corners``
(or the Polyline methods) to see how many corners were produced and how many
had their reach cut down by neighbouring geometry.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class RoundingStats:
    triplets: int = 0
    straight_triplets: int = 0
    corners: int = 0
    # corners whose reach ended below the requested distance
    clamped_corners: int = 0
    edges_emitted: int = 0
    edges_pruned: int = 0
    min_reach: float = 0.0
    max_reach: float = 0.0

    def record_reach(self, reach: float) -> None:
        if self.corners == 0:
            self.min_reach = reach
            self.max_reach = reach
        else:
            self.min_reach = min(self.min_reach, reach)
            self.max_reach = max(self.max_reach, reach)
        self.corners += 1

    def reset(self) -> None:
        for name, value in RoundingStats().__dict__.items():
            setattr(self, name, value)

    def to_dict(self) -> Dict[str, Any]:  # pragma: no cover - simple mapping
        return {
            'triplets': self.triplets,
            'straight_triplets': self.straight_triplets,
            'corners': self.corners,
            'clamped_corners': self.clamped_corners,
            'edges_emitted': self.edges_emitted,
            'edges_pruned': self.edges_pruned,
            'min_reach': self.min_reach,
            'max_reach': self.max_reach,
            'clamp_rate': (self.clamped_corners / self.corners) if self.corners else 0.0,
        }


__all__ = ['RoundingStats']
