"""Stacked text layout.

A line of text is replicated downwards; every copy is shifted a little
further and trimmed a little more from the top until nothing is left.
This module computes the (offset, trim) pairs and the size the stack
needs; the host does the clipping and drawing.
"""

from __future__ import annotations

from typing import List, Tuple

from tryoutgeom.geom import Point, Size, rounded

DEFAULT_SPACING = 8.0
TRIM_UNIT = 2.0


def layout_options(line_height: float,
                   spacing: float = DEFAULT_SPACING) -> List[Tuple[Point, float]]:
    """Return ``(offset, trim_height)`` for every copy of the line.

    The first copy is untrimmed and not offset; each following copy is
    trimmed by a further ``TRIM_UNIT`` and moved down by
    ``line_height - trim_height + spacing``.
    """
    lh = rounded(line_height) * 0.625
    trim = 0.0
    offset = Point(0.0, 0.0)
    options = []
    while trim < lh - TRIM_UNIT * 2:
        if trim > 0:
            offset = Point(0.0, lh - trim + spacing)
        options.append((offset, trim))
        trim += TRIM_UNIT
    return options


def size_that_fits(multi_line_width: float, single_line_height: float,
                   spacing: float = DEFAULT_SPACING) -> Size:
    """Size needed to show every copy of a line.

    Only the first line of a multi-line text is stacked, so the width
    comes from the wrapped measurement and the height from the
    unwrapped one.
    """
    options = layout_options(single_line_height, spacing)
    height = single_line_height + sum(offset.y for offset, _ in options)
    return Size(multi_line_width, height)
