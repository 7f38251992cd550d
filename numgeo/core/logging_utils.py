"""Logging for the numgeo logger family.

Every module logs through ``get_logger('numgeo.<module>')``. The family owns a
single stdout handler and never propagates to the process root logger, so
applications embedding numgeo keep full control of their own logging.
"""
from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

_ROOT_NAME = 'numgeo'
_FORMAT = '%(levelname)s %(name)s: %(message)s'

_handler: Optional[logging.StreamHandler] = None


def _package_root() -> logging.Logger:
    global _handler
    pkg_root = logging.getLogger(_ROOT_NAME)
    if _handler is None or _handler not in pkg_root.handlers:
        # the NullHandler from numgeo/__init__ is only a placeholder
        for h in list(pkg_root.handlers):
            if isinstance(h, logging.NullHandler):
                pkg_root.removeHandler(h)
        _handler = logging.StreamHandler(stream=sys.stdout)
        _handler.setFormatter(logging.Formatter(_FORMAT))
        pkg_root.addHandler(_handler)
    pkg_root.propagate = False
    return pkg_root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(level: Union[str, int] = 'INFO', stream: Optional[IO[str]] = None,
                      fmt: Optional[str] = None) -> logging.Logger:
    """Set the numgeo family level and, optionally, where and how it writes.

    Parameters
    ----------
    level : str or int
        Level name ('DEBUG', 'info', ...) or numeric level. Unknown names
        fall back to INFO.
    stream : file-like, optional
        Redirect the package handler (stdout by default) to this stream.
    fmt : str, optional
        Replace the handler's ``logging.Formatter`` format string.

    Returns the 'numgeo' logger. The process root logger is left untouched.
    """
    pkg_root = _package_root()
    pkg_root.setLevel(_to_level(level))
    if stream is not None:
        _handler.setStream(stream)
    if fmt is not None:
        _handler.setFormatter(logging.Formatter(fmt))
    return pkg_root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return ``name`` as a logger of the numgeo family.

    Without ``level`` the logger is NOTSET and follows the level chosen by
    configure_logging().
    """
    _package_root()
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging']
