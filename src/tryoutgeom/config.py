"""Blueprint and DXF export settings, optionally loaded from YAML.

A configuration file may hold a ``blueprint:`` and a ``dxf:`` mapping;
any key left out keeps its default::

   blueprint:
     grid_scale: 0.6
     dash: [6, 3]
   dxf:
     guide_layer: CONSTRUCTION
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

from tryoutgeom.errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlueprintConfig:
    """Proportions and stroke styles of the blueprint template."""

    grid_scale: float = 0.7
    inner_mark: float = 0.285
    line_width: float = 1.0
    dash: Tuple[float, ...] = (4.0, 2.0)
    corner_radius_ratio: float = 10.0 / 57


@dataclass(frozen=True)
class DxfConfig:
    """Document settings for DXF export.

    Colours are AutoCAD colour indices.
    """

    dxf_version: str = 'R2010'
    sheet_layer: str = 'SHEET'
    guide_layer: str = 'GUIDES'
    plan_layer: str = 'PLAN'
    text_layer: str = 'TEXT'
    sheet_color: int = 5
    guide_color: int = 8
    plan_color: int = 7
    text_color: int = 7


@dataclass(frozen=True)
class Config:
    blueprint: BlueprintConfig = field(default_factory=BlueprintConfig)
    dxf: DxfConfig = field(default_factory=DxfConfig)


def _isnum(x) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _coerce(section: str, name: str, default: Any, value: Any) -> Any:
    where = '{}.{}'.format(section, name)
    if isinstance(default, tuple):
        if not isinstance(value, (list, tuple)) or not all(_isnum(v) and v >= 0 for v in value):
            raise ConfigError('{} must be a list of non-negative numbers, got {!r}'.format(where, value))
        return tuple(float(v) for v in value)
    if isinstance(default, str):
        if not isinstance(value, str) or not value:
            raise ConfigError('{} must be a non-empty string, got {!r}'.format(where, value))
        return value
    if isinstance(default, int):
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 256:
            raise ConfigError('{} must be a colour index 0-256, got {!r}'.format(where, value))
        return value
    if not _isnum(value):
        raise ConfigError('{} must be a number, got {!r}'.format(where, value))
    return float(value)


def _section(cls, name: str, data: Any):
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise ConfigError('{} must be a mapping, got {}'.format(name, type(data).__name__))
    defaults = cls()
    known = {f.name for f in dataclasses.fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError('unknown {} keys: {}'.format(name, ', '.join(map(str, unknown))))
    values: Dict[str, Any] = {}
    for key, value in data.items():
        values[key] = _coerce(name, key, getattr(defaults, key), value)
    return dataclasses.replace(defaults, **values)


def config_from_dict(data: Dict[str, Any]) -> Config:
    """Build a ``Config`` from an already parsed mapping."""
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError('expected mapping at root, got {}'.format(type(data).__name__))
    unknown = sorted(set(data) - {'blueprint', 'dxf'})
    if unknown:
        raise ConfigError('unknown configuration sections: {}'.format(', '.join(map(str, unknown))))
    return Config(blueprint=_section(BlueprintConfig, 'blueprint', data.get('blueprint')),
                  dxf=_section(DxfConfig, 'dxf', data.get('dxf')))


def load_config(path: Union[str, Path]) -> Config:
    """Read a YAML configuration file; an empty file gives the defaults."""
    config_path = Path(path)
    try:
        with config_path.open('r', encoding='utf-8') as fp:
            data = yaml.safe_load(fp)
    except OSError as e:
        raise ConfigError('cannot read {}: {}'.format(config_path, e)) from e
    except yaml.YAMLError as e:
        raise ConfigError('YAML parse error in {}: {}'.format(config_path, e)) from e

    logger.debug('loaded configuration from %s', config_path)
    return config_from_dict(data)
