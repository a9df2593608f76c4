"""Blueprint layout: a sheet, a template grid of guides and a plan.

``layout_value`` computes the layout for a bounding rect and an
optional shape, and a ``BlueprintRenderer`` turns the layout into
drawing calls on a ``Drawable``.  The renderer is always passed in
explicitly; ``DefaultBlueprintRenderer`` is used when none is given.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

from tryoutgeom.config import BlueprintConfig
from tryoutgeom.geom import Rect, RectEdge
from tryoutgeom.path import Path, Shape
from tryoutgeom.segment import segment_dividing_at_angle, segment_dividing_at_distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrokeStyle:
    line_width: float = 1.0
    dash: Tuple[float, ...] = ()

    @property
    def is_dashed(self) -> bool:
        return bool(self.dash)


@dataclass(frozen=True)
class Guide:
    """A construction line or circle and the style to stroke it with."""

    path: Path
    style: StrokeStyle = field(default_factory=StrokeStyle)

    @property
    def bounding_rect(self) -> Rect:
        return self.path.bounding_rect

    @classmethod
    def slanted(cls, angle: float, rect: Rect, style: StrokeStyle = StrokeStyle()) -> "Guide":
        """Line through the centre of ``rect`` at ``angle`` radians."""
        return cls(Path.line_segment(*segment_dividing_at_angle(rect, angle)), style)

    @classmethod
    def horizontal(cls, distance: float, rect: Rect,
                   style: StrokeStyle = StrokeStyle()) -> "Guide":
        """Line across ``rect`` at ``distance`` below its top edge."""
        segment = segment_dividing_at_distance(rect, distance, RectEdge.MIN_Y)
        return cls(Path.line_segment(*segment), style)

    @classmethod
    def vertical(cls, distance: float, rect: Rect,
                 style: StrokeStyle = StrokeStyle()) -> "Guide":
        """Line down ``rect`` at ``distance`` right of its left edge."""
        segment = segment_dividing_at_distance(rect, distance, RectEdge.MIN_X)
        return cls(Path.line_segment(*segment), style)

    @classmethod
    def circle(cls, center, radius: float, style: StrokeStyle = StrokeStyle()) -> "Guide":
        return cls(Path.circle(center, radius), style)


@dataclass(frozen=True)
class Grid:
    """Ordered, indexable collection of guides."""

    guides: Tuple[Guide, ...] = ()

    def __iter__(self) -> Iterator[Guide]:
        return iter(self.guides)

    def __len__(self):
        return len(self.guides)

    def __getitem__(self, index):
        return self.guides[index]

    @classmethod
    def template(cls, grid_rect: Rect, bounding_rect: Rect,
                 config: Optional[BlueprintConfig] = None) -> "Grid":
        """Guides fitting ``grid_rect``, drawn across ``bounding_rect``.

        Four solid diagonals and axes through the centre, dashed
        vertical and horizontal fitting lines at the outer and inner
        marks (and their mirror images), then up to three solid fitting
        circles around the grid centre.
        """
        config = BlueprintConfig() if config is None else config
        solid = StrokeStyle(config.line_width)
        dashed = StrokeStyle(config.line_width, tuple(config.dash))

        guides = [Guide.slanted(angle, bounding_rect, solid)
                  for angle in (math.pi, math.pi / 2, math.pi / 4, -math.pi / 4)]

        marks = [0.0, config.inner_mark]
        for mark in marks + [1 - m for m in marks]:
            offset_x = grid_rect.min_x + grid_rect.height * mark
            offset_y = grid_rect.min_y + grid_rect.width * mark
            guides.append(Guide.vertical(offset_x, bounding_rect, dashed))
            guides.append(Guide.horizontal(offset_y, bounding_rect, dashed))

        center = grid_rect.center
        outer_radius = grid_rect.height / 2
        inscribed = outer_radius * (1 - 2 * config.inner_mark)
        circumscribed = inscribed * math.sqrt(2)
        for radius in (outer_radius, inscribed, circumscribed):
            if radius > 0:
                guides.append(Guide.circle(center, radius, solid))

        return cls(tuple(guides))


@dataclass(frozen=True)
class Sheet:
    bounding_rect: Rect


@dataclass(frozen=True)
class Plan:
    """Outline of the shape being laid out."""

    path: Path = field(default_factory=Path)

    @property
    def bounding_rect(self) -> Rect:
        return self.path.bounding_rect

    @classmethod
    def empty(cls) -> "Plan":
        return cls(Path())

    @classmethod
    def unwrap(cls, shape: Optional[Shape], rect: Rect) -> "Plan":
        if shape is None:
            return cls.empty()
        return cls(shape.path(rect))


@dataclass(frozen=True)
class Layout:
    sheet: Sheet
    grid: Grid
    plan: Plan


def layout_value(rect: Rect, shape: Optional[Shape] = None,
                 config: Optional[BlueprintConfig] = None) -> Layout:
    """Lay out sheet, grid and plan in ``rect``.

    The grid and plan are fitted to a centred square scaled down by
    ``config.grid_scale``; the guides themselves span all of ``rect``.
    """
    config = BlueprintConfig() if config is None else config
    outer = rect.aspect_ratio(1, inside=rect)
    grid_rect = outer.scaled(config.grid_scale)
    return Layout(sheet=Sheet(rect),
                  grid=Grid.template(grid_rect, rect, config),
                  plan=Plan.unwrap(shape, grid_rect))


def corner_radius(rect: Rect, ratio: float = 10.0 / 57) -> float:
    return min(rect.width, rect.height) * ratio


class BlueprintRenderer(ABC):
    """Turns a blueprint ``Layout`` into calls on a drawable."""

    @abstractmethod
    def draw(self, layout: Layout, drawable) -> None:
        ...


class DefaultBlueprintRenderer(BlueprintRenderer):
    """Rounded sheet outline, then the guides, then the plan.

    Each part goes to its own layer when layer names are given.
    """

    def __init__(self, config: Optional[BlueprintConfig] = None,
                 sheet_layer=False, guide_layer=False, plan_layer=False):
        self.config = BlueprintConfig() if config is None else config
        self.sheet_layer = sheet_layer
        self.guide_layer = guide_layer
        self.plan_layer = plan_layer

    def __repr__(self):
        return 'DefaultBlueprintRenderer({})'.format(self.config)

    def _stroke(self, drawable, style: StrokeStyle):
        drawable.linewidth = style.line_width
        drawable.linetype = 'DASHED' if style.is_dashed else False

    def draw(self, layout: Layout, drawable) -> None:
        sheet_rect = layout.sheet.bounding_rect
        drawable.layer = self.sheet_layer
        self._stroke(drawable, StrokeStyle(self.config.line_width))
        drawable.draw_path(Path.rounded_rectangle(
            sheet_rect, corner_radius(sheet_rect, self.config.corner_radius_ratio)))

        drawable.layer = self.guide_layer
        for guide in layout.grid:
            self._stroke(drawable, guide.style)
            drawable.draw_path(guide.path)

        if layout.plan.path.is_empty:
            logger.debug('blueprint has no plan')
        else:
            drawable.layer = self.plan_layer
            self._stroke(drawable, StrokeStyle(self.config.line_width))
            drawable.draw_path(layout.plan.path)


def render_blueprint(rect: Rect, drawable, shape: Optional[Shape] = None,
                     renderer: Optional[BlueprintRenderer] = None,
                     config: Optional[BlueprintConfig] = None) -> Layout:
    """Compute the layout for ``rect`` and draw it with ``renderer``."""
    layout = layout_value(rect, shape, config)
    if renderer is None:
        renderer = DefaultBlueprintRenderer(config)
    renderer.draw(layout, drawable)
    return layout
