import pytest

ezdxf = pytest.importorskip("ezdxf")

from tryoutgeom.blueprint import DefaultBlueprintRenderer, render_blueprint
from tryoutgeom.config import DxfConfig
from tryoutgeom.errors import ExportError
from tryoutgeom.ezdxf_drawable import EzdxfDrawable
from tryoutgeom.geom import Rect
from tryoutgeom.path import EllipseShape


def test_layers_are_created():
    dd = EzdxfDrawable(DxfConfig(guide_layer='CONSTRUCTION', guide_color=3))
    layers = dd.document.layers
    for name in ('SHEET', 'CONSTRUCTION', 'PLAN', 'TEXT'):
        assert name in layers
    assert layers.get('CONSTRUCTION').color == 3
    assert 'CONSTRUCTION' in dd.layerlist


def test_primitives():
    dd = EzdxfDrawable()
    dd.draw_line((0, 0), (10, 0))
    dd.draw_circle((5, 5), 2)
    dd.draw_arc((5, 5), 2, 0, 90)
    dd.draw_ellipse((0, 0), 4, 2, 90.0, 0.0, 360.0)
    msp = dd.modelspace
    assert len(msp.query('LINE')) == 1
    assert len(msp.query('CIRCLE')) == 1
    assert len(msp.query('ARC')) == 1
    (ellipse,) = msp.query('ELLIPSE')
    assert ellipse.dxf.ratio == pytest.approx(0.5)
    assert tuple(ellipse.dxf.major_axis)[:2] == pytest.approx((0, 4), abs=1e-12)


def test_pen_attributes():
    dd = EzdxfDrawable()
    dd.layer = 'GUIDES'
    dd.linetype = 'DASHED'
    dd.linecolor = 'red'
    dd.draw_line((0, 0), (1, 1))
    dd.linecolor = (10, 20, 30)
    dd.linetype = False
    dd.draw_line((1, 1), (2, 2))
    first, second = dd.modelspace.query('LINE')
    assert first.dxf.layer == 'GUIDES'
    assert first.dxf.linetype == 'DASHED'
    assert first.dxf.color == 1
    assert second.dxf.linetype == 'Continuous'
    assert second.rgb == (10, 20, 30)


def test_text_goes_to_text_layer():
    dd = EzdxfDrawable()
    dd.draw_text('A', (3, 4), 12, 45.0)
    (text,) = dd.modelspace.query('TEXT')
    assert text.dxf.text == 'A'
    assert text.dxf.layer == 'TEXT'
    assert text.dxf.height == 12
    assert text.dxf.rotation == 45.0
    assert tuple(text.dxf.insert)[:2] == pytest.approx((3, 4))


def test_blueprint_round_trip(tmp_path):
    config = DxfConfig()
    dd = EzdxfDrawable(config)
    renderer = DefaultBlueprintRenderer(sheet_layer=config.sheet_layer,
                                        guide_layer=config.guide_layer,
                                        plan_layer=config.plan_layer)
    render_blueprint(Rect(0, 0, 200, 100), dd, EllipseShape(), renderer=renderer)
    out = tmp_path / "blueprint.dxf"
    dd.save(out)

    doc = ezdxf.readfile(str(out))
    msp = doc.modelspace()
    assert len(msp.query('LINE[layer=="SHEET"]')) == 4
    assert len(msp.query('ARC[layer=="SHEET"]')) == 4
    assert len(msp.query('*[layer=="GUIDES"]')) == 15
    assert len(msp.query('LINE[linetype=="DASHED"]')) == 8
    assert len(msp.query('CIRCLE[layer=="PLAN"]')) == 1


def test_save_failure(tmp_path):
    dd = EzdxfDrawable()
    with pytest.raises(ExportError):
        dd.save(tmp_path / "missing" / "out.dxf")


def test_display_uses_filename(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    dd = EzdxfDrawable()
    dd.filename = 'sheet'
    assert dd.display()
    assert (tmp_path / 'sheet.dxf').exists()
    with pytest.raises(ValueError):
        dd.filename = 42
