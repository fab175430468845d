"""Logging utilities for rtriangulate.

Provides a consistent logger hierarchy and formatting without modifying the
process root logger. All rtriangulate code should obtain loggers via get_logger().
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_ROOT_NAME = 'rtriangulate'
_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _ensure_package_root() -> logging.Logger:
    """Ensure the 'rtriangulate' logger has a single stream handler and is
    isolated from the process root logger. Returns the 'rtriangulate' logger.
    """
    pkg_root = logging.getLogger(_ROOT_NAME)
    # Replace the NullHandler attached by the package __init__ with a real handler
    has_non_null = any(not isinstance(h, logging.NullHandler) for h in pkg_root.handlers)
    if not has_non_null:
        for h in list(pkg_root.handlers):
            pkg_root.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        pkg_root.addHandler(handler)
    pkg_root.propagate = False
    return pkg_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO', mute_external: bool = True) -> None:
    """Configure the 'rtriangulate' logger family level.

    This does NOT modify the process root logger. With ``mute_external`` the
    matplotlib loggers are kept at INFO when DEBUG is requested.
    """
    pkg_root = _ensure_package_root()
    lvl = _to_level(level)
    pkg_root.setLevel(lvl)
    if mute_external and lvl <= logging.DEBUG:
        for noisy in ('matplotlib', 'matplotlib.font_manager'):
            logging.getLogger(noisy).setLevel(logging.INFO)


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the 'rtriangulate' namespace.

    Without ``level`` the logger's level is left untouched, so new loggers
    inherit from the package logger configured via configure_logging().
    """
    if name != _ROOT_NAME and not name.startswith(_ROOT_NAME + '.'):
        name = f'{_ROOT_NAME}.{name}'
    _ensure_package_root()
    log = logging.getLogger(name)
    if level is not None:
        log.setLevel(_to_level(level))
    return log


__all__ = ['get_logger', 'configure_logging']
