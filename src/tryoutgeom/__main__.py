#!/usr/bin/env python3
"""
CLI exporting tryoutgeom layouts to DXF.

Usage:
    python -m tryoutgeom [-v] [--log-file FILE] blueprint OUTPUT.dxf
        [--width W] [--height H] [--shape rect|ellipse|none] [--config FILE]
    python -m tryoutgeom [-v] [--log-file FILE] circular TEXT OUTPUT.dxf
        [--char-width W] [--line-height H] [--start-angle DEG] [--guides]
        [--config FILE]

Examples:
    # Blueprint template with an elliptical plan
    python -m tryoutgeom blueprint plan.dxf --width 300 --height 200 --shape ellipse

    # Text laid out around a circle, one run per character
    python -m tryoutgeom circular "HELLO WORLD " ring.dxf --guides
"""

import argparse
import logging
import math
import sys
from typing import List, Optional

from tryoutgeom.blueprint import DefaultBlueprintRenderer, render_blueprint
from tryoutgeom.circular import (CircularLayout, DrawingOptions, TextRunSlice,
                                 draw_circular_layout)
from tryoutgeom.config import Config, load_config
from tryoutgeom.errors import TryoutGeomError
from tryoutgeom.ezdxf_drawable import EzdxfDrawable
from tryoutgeom.geom import Point, Rect
from tryoutgeom.log import setup_logging
from tryoutgeom.path import EllipseShape, RectangleShape

logger = logging.getLogger(__name__)

SHAPES = {
    'rect': RectangleShape,
    'ellipse': EllipseShape,
    'none': None,
}


def _load(args) -> Config:
    if args.config:
        return load_config(args.config)
    return Config()


def cmd_blueprint(args) -> int:
    """Lay out a blueprint in a WIDTH x HEIGHT sheet and write it."""
    config = _load(args)
    shape_cls = SHAPES[args.shape]
    shape = shape_cls() if shape_cls is not None else None

    sink = EzdxfDrawable(config.dxf)
    renderer = DefaultBlueprintRenderer(config.blueprint,
                                        sheet_layer=config.dxf.sheet_layer,
                                        guide_layer=config.dxf.guide_layer,
                                        plan_layer=config.dxf.plan_layer)
    layout = render_blueprint(Rect(0.0, 0.0, args.width, args.height), sink,
                              shape=shape, renderer=renderer, config=config.blueprint)
    logger.info('blueprint with %d guides', len(layout.grid))
    sink.save(args.output)
    return 0


def text_runs(text: str, char_width: float, line_height: float) -> List[TextRunSlice]:
    """One fixed-pitch run per character of ``text``."""
    return [TextRunSlice(char_width, line_height, Point(i * char_width, 0.0), ch)
            for i, ch in enumerate(text)]


def cmd_circular(args) -> int:
    """Lay ``TEXT`` around a circle and write it."""
    config = _load(args)
    runs = text_runs(args.text, args.char_width, args.line_height)
    layout = CircularLayout(runs, start_angle=math.radians(args.start_angle))

    sink = EzdxfDrawable(config.dxf)
    options = DrawingOptions.NONE
    if args.guides:
        options |= DrawingOptions.DEBUG_BOUNDING_GUIDES | DrawingOptions.DEBUG_SLICE_BOUNDS
    draw_circular_layout(layout, sink, options)
    logger.info('circular layout of %d runs, radius %.3f',
                len(layout), layout.typographic_bounds.ascender)
    sink.save(args.output)
    return 0


def _positive(value: str) -> float:
    x = float(value)
    if not (math.isfinite(x) and x > 0):
        raise argparse.ArgumentTypeError('must be positive: {}'.format(value))
    return x


def _finite(value: str) -> float:
    x = float(value)
    if not math.isfinite(x):
        raise argparse.ArgumentTypeError('must be finite: {}'.format(value))
    return x


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='python -m tryoutgeom',
        description='Export tryoutgeom layouts to DXF',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log debug output')
    parser.add_argument('--log-file', metavar='FILE',
                        help='Also write the log to FILE')

    subparsers = parser.add_subparsers(dest='action', required=True)

    blueprint_parser = subparsers.add_parser('blueprint', help='Export a blueprint template')
    blueprint_parser.add_argument('output', help='Output DXF file')
    blueprint_parser.add_argument('--width', type=_positive, default=240.0,
                                  help='Sheet width')
    blueprint_parser.add_argument('--height', type=_positive, default=240.0,
                                  help='Sheet height')
    blueprint_parser.add_argument('--shape', choices=sorted(SHAPES), default='none',
                                  help='Shape to lay out on the grid')
    blueprint_parser.add_argument('-c', '--config', metavar='FILE',
                                  help='YAML configuration file')

    circular_parser = subparsers.add_parser('circular', help='Export text laid out on a circle')
    circular_parser.add_argument('text', help='Text to lay out')
    circular_parser.add_argument('output', help='Output DXF file')
    circular_parser.add_argument('--char-width', type=_positive, default=12.0,
                                 help='Advance of every character')
    circular_parser.add_argument('--line-height', type=_positive, default=20.0,
                                 help='Height of the line')
    circular_parser.add_argument('--start-angle', type=_finite, default=0.0,
                                 help='Angle of the first character in degrees')
    circular_parser.add_argument('--guides', action='store_true',
                                 help='Draw debug guides and run bounds')
    circular_parser.add_argument('-c', '--config', metavar='FILE',
                                 help='YAML configuration file')

    args = parser.parse_args(argv)

    try:
        setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)
        if args.action == 'blueprint':
            return cmd_blueprint(args)
        elif args.action == 'circular':
            return cmd_circular(args)
        else:
            parser.print_help()
            return 1
    except TryoutGeomError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
