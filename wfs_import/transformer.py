"""
Koordinatentransformation zwischen dem projizierten System des WFS und WGS84.
"""

import logging
from typing import Tuple

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError

from .exceptions import CoordinateSystemError

logger = logging.getLogger(__name__)

# ETRS89 / UTM Zone 32N (EPSG:25832)
ETRS89_UTM32N_WKT = (
    'PROJCS["ETRS89_UTM_zone_32N",GEOGCS["GCS_ETRS_1989",DATUM["D_ETRS_1989",'
    'SPHEROID["GRS_1980",6378137,298.257222101]],PRIMEM["Greenwich",0],'
    'UNIT["Degree",0.017453292519943295]],PROJECTION["Transverse_Mercator"],'
    'PARAMETER["latitude_of_origin",0],PARAMETER["central_meridian",9],'
    'PARAMETER["scale_factor",0.9996],PARAMETER["false_easting",500000],'
    'PARAMETER["false_northing",0],UNIT["Meter",1]]'
)


class CoordinateTransformer:
    """Transformiert 2D-Koordinaten zwischen projiziertem System und WGS84.

    Beide Richtungen arbeiten mit ``always_xy=True``, also (x, y) bzw.
    (Länge, Breite).
    """

    def __init__(self, projected_wkt: str = ETRS89_UTM32N_WKT):
        """Initialisiert die Transformationen.

        Args:
            projected_wkt: WKT-Definition des projizierten Systems

        Raises:
            CoordinateSystemError: Bei ungültiger WKT-Definition
        """
        try:
            self.projected_crs = CRS.from_wkt(projected_wkt)
        except CRSError as e:
            raise CoordinateSystemError(f"Ungültige WKT-Definition: {str(e)}") from e

        if not self.projected_crs.is_projected:
            raise CoordinateSystemError(
                f"Koordinatensystem ist nicht projiziert: {self.projected_crs.name}"
            )

        self.geographic_crs = CRS.from_epsg(4326)
        self._to_geographic = Transformer.from_crs(
            self.projected_crs, self.geographic_crs, always_xy=True
        )
        self._to_projected = Transformer.from_crs(
            self.geographic_crs, self.projected_crs, always_xy=True
        )
        logger.debug(f"🗺️ Transformation {self.projected_crs.name} <-> WGS84 bereit")

    def to_geographic(self, x: float, y: float) -> Tuple[float, float]:
        """Projiziert (x, y) -> (Länge, Breite)."""
        return self._to_geographic.transform(x, y)

    def to_projected(self, longitude: float, latitude: float) -> Tuple[float, float]:
        """(Länge, Breite) -> projiziert (x, y)."""
        return self._to_projected.transform(longitude, latitude)
