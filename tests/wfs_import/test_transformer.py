"""
Tests für die Koordinatentransformation.
"""

import pytest

from wfs_import.exceptions import CoordinateSystemError
from wfs_import.models import Origin
from wfs_import.transformer import CoordinateTransformer


class TestCoordinateTransformer:
    """Tests für die Klasse CoordinateTransformer."""

    def test_projected_round_trip(self, transformer):
        """projiziert -> geographisch -> projiziert ergibt den Ausgangspunkt."""
        x, y = 359000.0, 5651000.0
        lon, lat = transformer.to_geographic(x, y)
        x2, y2 = transformer.to_projected(lon, lat)
        assert x2 == pytest.approx(x, abs=1e-3)
        assert y2 == pytest.approx(y, abs=1e-3)

    def test_geographic_round_trip(self, transformer):
        """geographisch -> projiziert -> geographisch ergibt den Ausgangspunkt."""
        lon, lat = 7.0, 51.0
        x, y = transformer.to_projected(lon, lat)
        lon2, lat2 = transformer.to_geographic(x, y)
        assert lon2 == pytest.approx(lon, abs=1e-6)
        assert lat2 == pytest.approx(lat, abs=1e-6)

    def test_central_meridian(self, transformer):
        """Auf dem Mittelmeridian (9°) liegt der Rechtswert bei 500000 m."""
        x, _ = transformer.to_projected(9.0, 51.0)
        assert x == pytest.approx(500000.0, abs=1e-3)

    def test_west_of_central_meridian(self, transformer):
        x, y = transformer.to_projected(7.0, 51.0)
        assert 300000.0 < x < 500000.0
        assert 5600000.0 < y < 5700000.0

    def test_invalid_wkt(self):
        with pytest.raises(CoordinateSystemError):
            CoordinateTransformer("PROJCS[kaputt")

    def test_geographic_wkt_rejected(self):
        wkt = 'GEOGCS["WGS 84",DATUM["WGS_1984",SPHEROID["WGS 84",6378137,298.257223563]],' \
              'PRIMEM["Greenwich",0],UNIT["degree",0.0174532925199433]]'
        with pytest.raises(CoordinateSystemError):
            CoordinateTransformer(wkt)


class TestOrigin:
    """Tests für die Umrechnung lokal <-> geographisch."""

    def test_origin_maps_to_zero(self, origin):
        assert origin.to_local(origin.latitude, origin.longitude) == (0.0, 0.0)

    def test_local_round_trip(self, origin):
        lat, lon = origin.from_local(123.4, -56.7)
        x, y = origin.to_local(lat, lon)
        assert x == pytest.approx(123.4, abs=1e-9)
        assert y == pytest.approx(-56.7, abs=1e-9)

    def test_north_increases_latitude(self, origin):
        lat, lon = origin.from_local(0.0, 100.0)
        assert lat > origin.latitude
        assert lon == pytest.approx(origin.longitude)

    def test_from_dict(self):
        origin = Origin.from_dict({'lat': 51.5, 'lon': 7.25, 'elevation': 80})
        assert origin == Origin(51.5, 7.25, 80.0)

    def test_from_dict_missing_field(self):
        with pytest.raises(ValueError):
            Origin.from_dict({'latitude': 51.0})
