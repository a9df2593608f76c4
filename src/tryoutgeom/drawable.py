## base class of drawable for tryoutgeom
## Copyright (c) 2024 tryoutgeom contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import logging
import math

from tryoutgeom.geom import Point, epsilon
from tryoutgeom.path import arc_point

logger = logging.getLogger(__name__)

## number of line segments used to flatten a cubic curve
CURVE_STEPS = 16

## Generic drawing functions -- assumed to use current coordinate
## transform and drawing pen (color, line weight, etc.)

class Drawable:
    """Base class for tryoutgeom drawing sinks"""

    ## pure virtual functions -- override for specific rendering
    ## system
    def draw_arc(self, p, r, start, end):
        logger.warning("pure virtual draw_arc called: %s, %s, %s, %s", p, r, start, end)

    def draw_line(self, p1, p2):
        logger.warning("pure virtual draw_line called: %s, %s", p1, p2)

    def draw_ellipse(self, center, semi_major, semi_minor, rotation, start, end):
        logger.warning("pure virtual draw_ellipse called: %s, %s, %s, %s, %s, %s",
                       center, semi_major, semi_minor, rotation, start, end)

    def draw_text(self, text, location, height, rotation=0.0):
        logger.warning("pure virtual draw_text called: %s, %s, %s, %s",
                       text, location, height, rotation)

    ## non-virtual utility drawing functions
    def draw_circle(self, p, r):
        self.draw_arc(p, r, 0.0, 360.0)

    def draw_segment(self, segment):
        p1, p2 = segment
        if tuple(p1) != tuple(p2):
            self.draw_line(p1, p2)

    def draw_path(self, path):
        """Stroke every element of a ``Path``.

        Curves are flattened into ``CURVE_STEPS`` line segments; arcs
        and ellipses are handed on as arcs, circles and ellipses.
        """
        current = None
        start = None
        for element in path.elements:
            kind = element[0]
            if kind == 'move':
                current = start = element[1]
            elif kind == 'line':
                if current is not None:
                    self.draw_segment((current, element[1]))
                current = element[1]
                if start is None:
                    start = current
            elif kind == 'curve':
                p, c1, c2 = element[1:]
                if current is None:
                    current = start = p
                for q in flatten_curve(current, c1, c2, p):
                    self.draw_segment((current, q))
                    current = q
            elif kind == 'arc':
                center, radius, a0, a1 = element[1:]
                self.draw_arc(center, radius, a0, a1)
                current = arc_point(center, radius, a1)
                if start is None:
                    start = arc_point(center, radius, a0)
            elif kind == 'ellipse':
                self._draw_inscribed_ellipse(element[1])
            elif kind == 'close':
                # arcs end a rounding error away from where they started
                if current is not None and start is not None and \
                        not Point(*current[:2]).isclose(Point(*start[:2])):
                    self.draw_segment((current, start))
                current = start
            else:
                raise ValueError('bad path element passed to draw_path: {}'.format(element))

    def _draw_inscribed_ellipse(self, rect):
        center = rect.center
        a = rect.width / 2
        b = rect.height / 2
        if a <= 0 or b <= 0:
            return
        if math.isclose(a, b):
            self.draw_circle(center, a)
        elif a >= b:
            self.draw_ellipse(center, a, b, 0.0, 0.0, 360.0)
        else:
            self.draw_ellipse(center, b, a, 90.0, 0.0, 360.0)

    ## place a laid out text run: the run's baseline-left corner goes
    ## through the transform and the text is turned by its rotation
    def draw_run(self, run_slice, transform):
        if run_slice.content is None:
            return
        r = run_slice.rect
        location = transform.apply((r.min_x, r.max_y))
        rotation = math.degrees(math.atan2(transform.b, transform.a))
        self.draw_text(str(run_slice.content), location, r.height, rotation)

    def __init__(self):
        self.__linetype = False
        self.__linetypelist = [False, 'Continuous', 'DASHED']
        self.__linewidth = 1.0
        self.__linecolor = False
        self.__layer = False
        self.__layerlist = [False, 'default']

    ## Various property functions

    @property
    def layerlist(self):
        return self.__layerlist

    def _set_layerlist(self, lst):
        self.__layerlist = lst

    @layerlist.setter
    def layerlist(self, lst):
        if isinstance(lst, list):
            self._set_layerlist(lst)
        else:
            raise ValueError('bad layer list ' + str(lst))

    @property
    def layer(self):
        return self.__layer

    def _set_layer(self, lyr):
        self.__layer = lyr

    @layer.setter
    def layer(self, lyr=False):
        if lyr in self.layerlist:
            self._set_layer(lyr)
        else:
            raise ValueError('bad layer: ' + str(lyr))

    @property
    def linewidth(self):
        return self.__linewidth

    def _set_linewidth(self, lw):
        self.__linewidth = lw

    @linewidth.setter
    def linewidth(self, lw=False):
        if not isinstance(lw, (int, float)):
            raise ValueError('invalid linewidth ' + str(lw))
        if isinstance(lw, bool) and lw == False:
            lw = 1.0
        elif lw < epsilon:
            lw = epsilon
        self._set_linewidth(lw)

    @property
    def linetypelist(self):
        return self.__linetypelist

    @property
    def linetype(self):
        return self.__linetype

    def _set_linetype(self, lt):
        self.__linetype = lt

    @linetype.setter
    def linetype(self, lt=False):
        if lt == 'Continuous':
            lt = False
        if lt in self.linetypelist:
            self._set_linetype(lt)
        else:
            raise ValueError('unsupported linetype ' + str(lt))

    ## color can be set as an AutoCAD index color, one of the colour
    ## names below, or an RGB triple

    def __checkcolor(self, c):
        def isbyte(x):
            return isinstance(x, int) and not isinstance(x, bool) and 0 <= x <= 255
        if isinstance(c, bool):
            return c == False
        if isinstance(c, (list, tuple)):
            return len(c) == 3 and all(isbyte(x) for x in c)
        if isinstance(c, int):
            return 0 <= c <= 256
        return isinstance(c, str) and c.lower() in self.colordict

    @property
    def linecolor(self):
        return self.__linecolor

    def _set_linecolor(self, c):
        self.__linecolor = c

    @linecolor.setter
    def linecolor(self, c=False):
        if self.__checkcolor(c):
            self._set_linecolor(c)
        else:
            raise ValueError('bad linecolor ' + str(c))

    ## resolve a colour to an AutoCAD colour index, or None for an
    ## RGB triple, which has no exact index
    def color_index(self, c):
        if isinstance(c, bool) or c is None:
            return 256  # bylayer
        if isinstance(c, str):
            return self.colordict[c.lower()]
        if isinstance(c, int):
            return c
        return None

    ## non-property methods

    def __repr__(self):
        return 'an abstract Drawable instance'

    ## cause drawing page to be rendered -- pure virtual in base class
    def display(self):
        logger.warning('pure virtual display function called')
        return True

    ## colour names and their AutoCAD colour indices
    colordict = {
        'red': 1,
        'yellow': 2,
        'green': 3,
        'cyan': 4,
        'aqua': 4,
        'blue': 5,
        'magenta': 6,
        'fuchsia': 6,
        'white': 7,
        'black': 7,
        'gray': 8,
        'grey': 8,
        'lightgray': 9,
        'lightgrey': 9,
    }


def flatten_curve(p0, c1, c2, p3, steps=CURVE_STEPS):
    """Points along a cubic Bezier curve, excluding ``p0``."""
    points = []
    for i in range(1, steps + 1):
        t = i / steps
        u = 1.0 - t
        x = u**3 * p0[0] + 3 * u * u * t * c1[0] + 3 * u * t * t * c2[0] + t**3 * p3[0]
        y = u**3 * p0[1] + 3 * u * u * t * c1[1] + 3 * u * t * t * c2[1] + t**3 * p3[1]
        points.append(Point(x, y))
    return points
