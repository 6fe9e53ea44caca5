"""Configuration objects for tolerant geometry and corner rounding."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Optional, Any, Dict

from .constants import EPS_DEFAULT


def _apply_overrides(cfg, overrides: Optional[Dict[str, Any]]):
    if not overrides:
        return cfg
    known = {f.name for f in fields(cfg)}
    for k, v in overrides.items():
        if k not in known:
            raise ValueError(f"unknown {type(cfg).__name__} option: {k!r}")
        setattr(cfg, k, v)
    if not cfg.eps > 0.0:
        raise ValueError(f"eps must be positive, got {cfg.eps!r}")
    return cfg


@dataclass
class GeometryConfig:
    """Tolerance carried alongside geometry work instead of a module global."""
    eps: float = EPS_DEFAULT

    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]] = None) -> 'GeometryConfig':
        return _apply_overrides(cls(), values)


@dataclass
class RoundingConfig:
    """Parameters for ``rounded_corners``.

    Attributes
    ----------
    point_distance : float
        Requested reach of each corner along its two edges.
    control_point_distance : float
        Distance of the Bezier control points from the curve endpoints,
        measured back toward the corner. Capped by the reach.
    eps : float
        Tolerance used for every comparison made while rounding.
    """
    point_distance: float = 10.0
    control_point_distance: float = 5.0
    eps: float = EPS_DEFAULT

    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]] = None, *, geometry: Optional[GeometryConfig] = None) -> 'RoundingConfig':
        cfg = cls()
        if geometry is not None:
            cfg.eps = geometry.eps
        return _apply_overrides(cfg, values)

    def as_bezier_config(self) -> 'BezierCornerConfig':
        return BezierCornerConfig(
            radius=self.point_distance,
            control_point_distance=self.control_point_distance,
            eps=self.eps,
        )


@dataclass
class BezierCornerConfig:
    """Parameters for ``bezier_corners`` (fixed-radius fillets)."""
    radius: float = 10.0
    control_point_distance: float = 5.0
    eps: float = EPS_DEFAULT

    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]] = None, *, geometry: Optional[GeometryConfig] = None) -> 'BezierCornerConfig':
        cfg = cls()
        if geometry is not None:
            cfg.eps = geometry.eps
        return _apply_overrides(cfg, values)


@dataclass
class CurvekitConfig:
    """Bundle of the geometry and rounding settings.

    ``extras`` is a free-form dictionary for application-specific options.
    """
    geometry: GeometryConfig = field(default_factory=GeometryConfig)
    rounding: RoundingConfig = field(default_factory=RoundingConfig)
    bezier: BezierCornerConfig = field(default_factory=BezierCornerConfig)
    extras: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, values: Optional[Dict[str, Any]] = None) -> 'CurvekitConfig':
        values = dict(values or {})
        geometry = GeometryConfig.from_dict(values.pop('geometry', None))
        rounding = RoundingConfig.from_dict(values.pop('rounding', None), geometry=geometry)
        bezier = BezierCornerConfig.from_dict(values.pop('bezier', None), geometry=geometry)
        return cls(geometry=geometry, rounding=rounding, bezier=bezier, extras=values)


__all__ = [
    'GeometryConfig',
    'RoundingConfig',
    'BezierCornerConfig',
    'CurvekitConfig',
]
