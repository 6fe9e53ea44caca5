"""Logging utilities for curvekit.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All curvekit code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')
_ROOT_NAME = 'curvekit'


def _ensure_curvekit_root() -> logging.Logger:
    """Give the 'curvekit' logger a single stdout handler, detached from the
    process root logger, and return it.
    """
    root = logging.getLogger(_ROOT_NAME)
    # The package __init__ installs a NullHandler; swap it for a real stream once logging is requested
    if not any(not isinstance(h, logging.NullHandler) for h in root.handlers):
        for h in list(root.handlers):
            root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Set the level of the 'curvekit' logger family.

    With ``mute_external`` the matplotlib loggers are held at INFO when
    curvekit runs at DEBUG, since the plotting helpers pull matplotlib in and
    its font manager is very chatty. The process root logger is left alone.
    """
    root = _ensure_curvekit_root()
    lvl = _to_level(level)
    root.setLevel(lvl)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'curvekit' namespace.

    Without an explicit level the logger is NOTSET and inherits whatever
    configure_logging() put on the 'curvekit' parent.
    """
    _ensure_curvekit_root()
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
