"""
Tests für die Übersetzung der Bounding Box.
"""

import pytest

from wfs_import.bbox import BoundingBox, translate_bbox
from wfs_import.models import ProjectedBoundingBox


class TestBoundingBox:

    def test_from_vertices(self, boundary):
        bbox = BoundingBox.from_vertices(boundary)
        assert bbox.min == (-50.0, -50.0, 0.0)
        assert bbox.max == (50.0, 50.0, 0.0)

    def test_from_2d_vertices(self):
        bbox = BoundingBox.from_vertices([(1, 2), (3, -4)])
        assert bbox.min == (1.0, -4.0, 0.0)
        assert bbox.max == (3.0, 2.0, 0.0)

    def test_empty_vertices(self):
        with pytest.raises(ValueError):
            BoundingBox.from_vertices([])


class TestTranslateBBox:

    @pytest.mark.parametrize("vertices", [
        [(-50, -50, 0), (50, 50, 0)],
        [(0, 0, 0), (1000, 10, 5)],
        [(-5000, 200, 0), (-4990, 250, 0)],
        [(0, 0, 0), (0, 100, 0)],
    ])
    def test_min_not_greater_than_max(self, vertices, origin, transformer):
        result = translate_bbox(BoundingBox.from_vertices(vertices), origin, transformer)
        assert result.min_x <= result.max_x
        assert result.min_y <= result.max_y

    def test_extent_close_to_local_size(self, boundary, origin, transformer):
        result = translate_bbox(BoundingBox.from_vertices(boundary), origin, transformer)
        # UTM-Maßstab und Gitterkonvergenz verändern die Ausdehnung nur gering
        assert result.max_x - result.min_x == pytest.approx(100.0, rel=0.05)
        assert result.max_y - result.min_y == pytest.approx(100.0, rel=0.05)

    def test_contains_origin(self, boundary, origin, transformer):
        result = translate_bbox(BoundingBox.from_vertices(boundary), origin, transformer)
        x, y = transformer.to_projected(origin.longitude, origin.latitude)
        assert result.min_x < x < result.max_x
        assert result.min_y < y < result.max_y

    def test_uses_min_and_max_corner(self, boundary, origin, transformer):
        result = translate_bbox(BoundingBox.from_vertices(boundary), origin, transformer)
        latitude, longitude = origin.from_local(-50.0, -50.0)
        min_x, min_y = transformer.to_projected(longitude, latitude)
        latitude, longitude = origin.from_local(50.0, 50.0)
        max_x, max_y = transformer.to_projected(longitude, latitude)
        assert result.as_tuple() == pytest.approx((min_x, min_y, max_x, max_y), abs=1e-6)

    def test_degenerate_box_is_point(self, origin, transformer):
        bbox = BoundingBox.from_vertices([(10, 10, 0), (10, 10, 0)])
        result = translate_bbox(bbox, origin, transformer)
        assert result.min_x == pytest.approx(result.max_x)
        assert result.min_y == pytest.approx(result.max_y)


def test_to_query():
    bbox = ProjectedBoundingBox(359000.5, 5651000.0, 359100.0, 5651100.25)
    assert bbox.to_query(25832) == \
        "359000.5,5651000.0,359100.0,5651100.25,urn:ogc:def:crs:EPSG::25832"
