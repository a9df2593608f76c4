"""Exception types raised by tryoutgeom."""

from __future__ import annotations


class TryoutGeomError(Exception):
    """Base exception for tryoutgeom errors."""


class ConfigError(TryoutGeomError, ValueError):
    """Malformed or unreadable configuration file."""


class ExportError(TryoutGeomError):
    """A drawing could not be written to disk."""
