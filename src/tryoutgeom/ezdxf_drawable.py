## tryoutgeom drawing sink writing DXF files with the ezdxf package
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

import ezdxf
from ezdxf import colors
from ezdxf.enums import TextEntityAlignment

import tryoutgeom.drawable as drawable
from tryoutgeom.config import DxfConfig
from tryoutgeom.errors import ExportError

logger = logging.getLogger(__name__)


## class to provide dxf drawing functionality.  Coordinates are
## written unchanged, so y grows downwards as on screen.
class EzdxfDrawable(drawable.Drawable):

    def __init__(self, config=None):
        super().__init__()
        self.config = DxfConfig() if config is None else config

        # only the standard linetypes; the default blocks contain SOLID
        # entities some CAD programs reject
        self.__doc = ezdxf.new(dxfversion=self.config.dxf_version, setup=['linetypes'])
        self.__doc.header['$INSUNITS'] = 0  # unitless
        for name, color in ((self.config.sheet_layer, self.config.sheet_color),
                            (self.config.guide_layer, self.config.guide_color),
                            (self.config.plan_layer, self.config.plan_color),
                            (self.config.text_layer, self.config.text_color)):
            if name not in self.__doc.layers:
                self.__doc.layers.add(name, color=color)
        self.__msp = self.__doc.modelspace()
        self.__filename = "tryoutgeom-out"
        self.layerlist = [False, '0', self.config.sheet_layer, self.config.guide_layer,
                          self.config.plan_layer, self.config.text_layer]

    def __repr__(self):
        return 'an instance of EzdxfDrawable'

    ## properties

    @property
    def document(self):
        return self.__doc

    @property
    def modelspace(self):
        return self.__msp

    @property
    def filename(self):
        return self.__filename

    def _set_filename(self, name):
        self.__filename = name

    @filename.setter
    def filename(self, name):
        if not isinstance(name, str):
            raise ValueError('bad (non-string) filename: ' + str(name))
        self._set_filename(name)

    ## common entity attributes for the current pen
    def _dxfattribs(self, layer=None):
        if layer is None:
            layer = self.layer
        if layer == False:
            layer = '0'
        attribs = {'layer': layer}

        color = self.linecolor
        index = self.color_index(color)
        if index is None:
            attribs['color'] = 256
            attribs['true_color'] = colors.rgb2int(tuple(color))
        else:
            attribs['color'] = index

        linetype = self.linetype
        if linetype == False:
            linetype = 'Continuous'
        attribs['linetype'] = linetype
        return attribs

    ## Overload virtual base class drawing methods

    def draw_line(self, p1, p2):
        self.__msp.add_line((p1[0], p1[1]), (p2[0], p2[1]),
                            dxfattribs=self._dxfattribs())

    def draw_arc(self, p, r, start, end):
        if start == 0 and end == 360:
            self.__msp.add_circle((p[0], p[1]), r, dxfattribs=self._dxfattribs())
        else:
            self.__msp.add_arc((p[0], p[1]), r, start, end,
                               dxfattribs=self._dxfattribs())

    def draw_ellipse(self, center, semi_major, semi_minor, rotation, start, end):
        """Draw an ellipse or elliptical arc.

        DXF describes the ellipse by its major axis end point relative
        to the centre, the minor to major ratio and start and end
        parameters in radians.
        """
        rot_rad = math.radians(rotation)
        major_axis = (semi_major * math.cos(rot_rad),
                      semi_major * math.sin(rot_rad),
                      0)
        ratio = semi_minor / semi_major

        if start == 0 and end == 360:
            start_param = 0.0
            end_param = math.tau
        else:
            start_param = math.radians(start)
            end_param = math.radians(end)
            if end_param < start_param:
                end_param += math.tau

        self.__msp.add_ellipse(
            center=(center[0], center[1]),
            major_axis=major_axis,
            ratio=ratio,
            start_param=start_param,
            end_param=end_param,
            dxfattribs=self._dxfattribs()
        )

    def draw_text(self, text, location, height, rotation=0.0):
        layer = self.layer
        if layer == False:
            layer = self.config.text_layer
        dxfattr = self._dxfattribs(layer)
        del dxfattr['linetype']
        dxfattr.update({'height': height,
                        'rotation': rotation})
        self.__msp.add_text(
            text,
            dxfattribs=dxfattr).set_placement(
                (location[0], location[1]),
                align=TextEntityAlignment.LEFT
            )

    def save(self, path):
        try:
            self.__doc.saveas(str(path))
        except OSError as e:
            raise ExportError('cannot write {}: {}'.format(path, e)) from e
        logger.info('wrote %d entities to %s', len(self.__msp), path)

    def display(self):
        self.save("{}.dxf".format(self.filename))
        return True
